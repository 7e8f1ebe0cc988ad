"""Translate credential errors into HTTP exceptions for API surfaces."""

from __future__ import annotations

from fastapi import HTTPException

from credential_auth.domain.auth.errors import CredentialError, FailureClass

_SERVER_ERROR_DETAIL = "could not process credential"


def to_http_exception(error: CredentialError) -> HTTPException:
    """Map client-caused failures to 400 and server-caused failures to 500."""

    if error.failure_class is FailureClass.CLIENT:
        return HTTPException(status_code=400, detail=str(error))
    return HTTPException(status_code=500, detail=_SERVER_ERROR_DETAIL)
