import re
from pydantic import BaseModel, Field, field_validator
from typing import Optional

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
NAME_REGEX = re.compile(r"^[a-zA-Z\s'-]+$")
MESSAGE_MIN_LENGTH = 10

class ContactRequest(BaseModel):
    """Body posted by the contact form; same rules the form checks client-side."""
    # Missing keys default to "" so the required check reports them like blanks
    firstName: str = Field("", validate_default=True, description="Sender's first name")
    lastName: str = Field("", validate_default=True, description="Sender's last name")
    email: str = Field("", validate_default=True)
    subject: Optional[str] = None
    message: str = Field("", validate_default=True)

    @field_validator("firstName", "lastName", "email", "message", mode="before")
    @classmethod
    def required(cls, value):
        if value is None or not str(value).strip():
            raise ValueError("This field is required")
        return str(value).strip()

    @field_validator("firstName", "lastName")
    @classmethod
    def valid_name(cls, value: str) -> str:
        if not NAME_REGEX.match(value):
            raise ValueError("Please enter a valid name")
        return value

    @field_validator("email")
    @classmethod
    def valid_email(cls, value: str) -> str:
        if not EMAIL_REGEX.match(value):
            raise ValueError("Please enter a valid email address")
        return value

    @field_validator("message")
    @classmethod
    def detailed_message(cls, value: str) -> str:
        if len(value) < MESSAGE_MIN_LENGTH:
            raise ValueError("Please provide a more detailed message (minimum 10 characters)")
        return value

class ContactResponse(BaseModel):
    status: str
    message: str
