"""Auth API routes: registration with a profile upload, login, and profile read."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from auth.dependencies import (
    get_auth_service,
    get_file_storage,
    get_onboarding_service,
    get_profile_service,
)
from auth.exceptions import AuthException
from auth.schemas import ApiResponse, LoginData, LoginRequest, UserProfileData
from auth.services.auth_service import AuthService
from auth.services.onboarding_service import OnboardingService
from auth.services.profile_service import ProfileService
from services.file_storage import FileStorage, UploadedFile

router = APIRouter()


async def _receive_upload(file: UploadFile | None, file_storage: FileStorage) -> UploadedFile | None:
    if file is None:
        return None
    try:
        content = await file.read()
    finally:
        await file.close()
    return await file_storage.receive(file.filename, content)


@router.post("/register", response_model=ApiResponse, status_code=status.HTTP_201_CREATED)
async def register(
    username: str | None = Form(default=None),
    email: str | None = Form(default=None),
    password: str | None = Form(default=None),
    file: UploadFile | None = File(default=None),
    file_storage: FileStorage = Depends(get_file_storage),
    onboarding_service: OnboardingService = Depends(get_onboarding_service),
) -> ApiResponse:
    try:
        upload = await _receive_upload(file, file_storage)
        user = await onboarding_service.register(username, email, password, upload)
    except AuthException as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    return ApiResponse(
        success=True,
        message="User registered successfully!",
        data={"username": user["username"], "email": user["email"]},
    )


@router.post("/login", response_model=ApiResponse, status_code=status.HTTP_200_OK)
async def login(
    payload: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> ApiResponse:
    try:
        result = await auth_service.login(payload.username, payload.password)
    except AuthException as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    return ApiResponse(
        success=True,
        message="Login successful!",
        data=LoginData(**result).model_dump(),
    )


@router.get("/api/user/{username}", response_model=ApiResponse, status_code=status.HTTP_200_OK)
async def get_user(
    username: str,
    profile_service: ProfileService = Depends(get_profile_service),
) -> ApiResponse:
    """Get user data along with the calculated CIBIL score."""
    try:
        result = await profile_service.read_profile(username)
    except AuthException as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    return ApiResponse(
        success=True,
        message="User retrieved",
        data=UserProfileData(**result).model_dump(),
    )
