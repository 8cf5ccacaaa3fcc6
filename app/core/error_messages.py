# app/core/error_messages.py
from fastapi import HTTPException, status


class ErrorResponses:
    UNAUTHORIZED = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="unauthorized access",
        headers={"WWW-Authenticate": "Bearer"},
    )
    FORBIDDEN = HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="forbidden access")
    INVALID_ID = HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid id")
    EMPTY_UPDATE = HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="no fields to update")


class PaymentProviderError(Exception):
    """Raised when the payment provider rejects or fails an intent request."""

    def __init__(self, message: str, code: str = "provider_error"):
        super().__init__(message)
        self.message = message
        self.code = code
