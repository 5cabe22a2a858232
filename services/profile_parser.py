"""
Parser for uploaded financial-profile documents.

An upload is accepted when it is a well-formed JSON object. No field is
required at this point: readers of the stored profile treat missing fields
as absent (see services/financial_profile.py).
"""

from __future__ import annotations

import json
from typing import Any


FinancialProfile = dict[str, Any]


class ProfileParseError(ValueError):
    """Raised when uploaded bytes are not a well-formed profile document."""


def _reject_constant(name: str) -> Any:
    # Python's json accepts NaN/Infinity; strict JSON does not
    raise ProfileParseError(f"Non-standard JSON constant: {name}")


def parse_profile(raw: bytes) -> FinancialProfile:
    """
    Decode and parse an uploaded profile.

    Args:
        raw: File contents as uploaded

    Returns:
        The parsed JSON object

    Raises:
        ProfileParseError: If the bytes are not UTF-8, not valid JSON (including
            nesting deeper than the decoder can follow), or the top-level value
            is not an object
    """
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ProfileParseError("File is not valid UTF-8 text") from exc

    try:
        document = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ProfileParseError(f"Malformed JSON at line {exc.lineno} column {exc.colno}") from exc
    except RecursionError as exc:
        raise ProfileParseError("Document is nested too deeply") from exc

    if not isinstance(document, dict):
        raise ProfileParseError(
            f"Expected a JSON object at top level, got {type(document).__name__}"
        )
    return document
