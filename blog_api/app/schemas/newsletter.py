"""
Pydantic schemas for the newsletter signup and the contact form.

Both forms only need their shape checked: nothing is stored and no
email is sent.  Addresses are checked with ``email-validator`` without
a DNS deliverability lookup.
"""

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator


def _check_email(value: str) -> str:
    try:
        return validate_email(value, check_deliverability=False).normalized
    except EmailNotValidError as e:
        raise ValueError("Invalid email address") from e


class SubscribeRequest(BaseModel):
    """Newsletter subscription body."""

    email: str = Field(..., examples=["reader@example.com"])

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, v: str) -> str:
        return _check_email(v)


class ContactRequest(BaseModel):
    """Message submitted from the contact page."""

    name: str = Field(..., examples=["Alex Chen"])
    email: str = Field(..., examples=["alex@example.com"])
    subject: str = Field(..., examples=["Guest post"])
    message: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if len(v.strip()) < 2:
            raise ValueError("Name must be at least 2 characters")
        return v

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, v: str) -> str:
        try:
            return _check_email(v)
        except ValueError:
            raise ValueError("Please enter a valid email address") from None

    @field_validator("subject")
    @classmethod
    def validate_subject(cls, v: str) -> str:
        if len(v.strip()) < 5:
            raise ValueError("Subject must be at least 5 characters")
        return v

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        if len(v.strip()) < 10:
            raise ValueError("Message must be at least 10 characters")
        return v


class MessageResponse(BaseModel):
    """Plain acknowledgement returned by form endpoints."""

    message: str
