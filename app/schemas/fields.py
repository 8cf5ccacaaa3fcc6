# app/schemas/fields.py
from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator
from typing import Annotated


def check_email(value: str) -> str:
    """Reject malformed addresses but keep the value exactly as sent."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(str(e))
    return value


# Tokens, stored documents and self-scoped path segments all carry the same string
Email = Annotated[str, AfterValidator(check_email)]
