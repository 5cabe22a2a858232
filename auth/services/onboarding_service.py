"""
User onboarding: credentials plus an uploaded financial profile.

Registration runs as a fixed sequence of stages. Each stage either advances
or raises an AuthException tagged with the stage that failed:

    RECEIVED -> HASHED -> PARSED -> RETAINED -> PERSISTED -> COMMITTED

The transient upload is discarded exactly once whichever way the sequence
ends. The retained copy survives only a committed registration. The copy is
made before the database write, so a crash between the two leaves an orphaned
file rather than a record pointing at nothing.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any

from auth.exceptions import AuthException, ConflictError, InternalError, ValidationError
from auth.interfaces.user_store import UserStore
from auth.security import hash_password, password_too_long
from services.file_storage import FileStorage, RetainedFile, UploadedFile
from services.profile_parser import ProfileParseError, parse_profile

logger = logging.getLogger(__name__)

# Matches the String(255) identity columns of the users table
MAX_IDENTITY_LENGTH = 255


class RegistrationStage(str, Enum):
    RECEIVED = "received"
    HASHED = "hashed"
    PARSED = "parsed"
    RETAINED = "retained"
    PERSISTED = "persisted"
    COMMITTED = "committed"


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class OnboardingService:
    def __init__(self, user_store: UserStore, file_storage: FileStorage) -> None:
        self._users = user_store
        self._files = file_storage

    async def register(
        self,
        username: str | None,
        email: str | None,
        password: str | None,
        upload: UploadedFile | None,
    ) -> dict[str, Any]:
        """
        Register a user from credentials and an uploaded profile file.

        Returns:
            The stored user record (without the password hash)

        Raises:
            ValidationError: Missing fields or an unparseable upload
            ConflictError: Username or email already registered
            InternalError: Hashing, filesystem or store failure
        """
        try:
            self._check_received(username, email, password, upload)
            hashed_password = await self._hash(password)
            profile = await self._parse(upload)
            retained = await self._retain(upload)
            try:
                user = await self._persist(username, email, hashed_password, profile, retained)
            except AuthException:
                await self._files.discard(retained.path)
                raise
        finally:
            if upload is not None:
                await self._files.discard(upload.path)

        logger.info("Registered user username=%s", username)
        user.pop("hashed_password", None)
        return user

    def _check_received(
        self,
        username: str | None,
        email: str | None,
        password: str | None,
        upload: UploadedFile | None,
    ) -> None:
        if _is_blank(username) or _is_blank(email) or not password or upload is None:
            raise ValidationError(
                "All fields and a file are required.", stage=RegistrationStage.RECEIVED
            )
        if password_too_long(password):
            raise ValidationError(
                "Password must be at most 72 bytes.", stage=RegistrationStage.RECEIVED
            )
        if len(username) > MAX_IDENTITY_LENGTH or len(email) > MAX_IDENTITY_LENGTH:
            raise ValidationError(
                f"Username and email must be at most {MAX_IDENTITY_LENGTH} characters.",
                stage=RegistrationStage.RECEIVED,
            )

    async def _hash(self, password: str) -> str:
        try:
            return await asyncio.to_thread(hash_password, password)
        except Exception as exc:
            logger.exception("Password hashing failed")
            raise InternalError(
                "Error registering user", stage=RegistrationStage.HASHED
            ) from exc

    async def _parse(self, upload: UploadedFile) -> dict[str, Any]:
        try:
            raw = await self._files.read(upload)
        except OSError as exc:
            logger.exception("Could not read upload %s", upload.path)
            raise InternalError(
                "Error registering user", stage=RegistrationStage.PARSED
            ) from exc
        try:
            return parse_profile(raw)
        except ProfileParseError as exc:
            logger.info("Rejected upload %s: %s", upload.original_filename, exc)
            raise ValidationError(
                "Invalid file format. Please upload a valid JSON file.",
                stage=RegistrationStage.PARSED,
            ) from exc

    async def _retain(self, upload: UploadedFile) -> RetainedFile:
        try:
            return await self._files.retain(upload)
        except OSError as exc:
            logger.exception("Could not retain upload %s", upload.path)
            raise InternalError(
                "Error registering user", stage=RegistrationStage.RETAINED
            ) from exc

    async def _persist(
        self,
        username: str,
        email: str,
        hashed_password: str,
        profile: dict[str, Any],
        retained: RetainedFile,
    ) -> dict[str, Any]:
        record = {
            "username": username,
            "email": email,
            "hashed_password": hashed_password,
            "financial_profile": profile,
            "retained_file_path": str(retained.path),
        }
        try:
            return await self._users.create_user(record)
        except ConflictError as exc:
            logger.info("Duplicate registration username=%s", username)
            raise ConflictError(
                "Username or email already exists.", stage=RegistrationStage.PERSISTED
            ) from exc
        except Exception as exc:
            logger.exception("Store write failed for username=%s", username)
            raise InternalError(
                "Error registering user", stage=RegistrationStage.PERSISTED
            ) from exc
