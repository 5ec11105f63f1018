from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class ContactFormRequest(BaseModel):
    """Request schema for contact form submission.

    Every field is optional here so that presence is reported with the
    form's own 400 message instead of a framework validation error.
    """
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    full_name: Optional[str] = Field(None, alias="fullName")
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def drop_falsy_values(cls, data):
        """Treat false, 0 and empty strings as absent so they count as missing."""
        if isinstance(data, dict):
            return {
                key: None if isinstance(value, (bool, int, float, str)) and not value else value
                for key, value in data.items()
            }
        return data

    def missing_fields(self) -> List[str]:
        """Names of required fields that are absent or empty."""
        return [
            name
            for name in ("full_name", "email", "subject", "message")
            if not getattr(self, name)
        ]


class ContactEntry(BaseModel):
    """A stored contact form submission."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    subject: str
    message: str
    submitted_at: str


class PageContactsResponse(BaseModel):
    """Response schema for listing submissions."""
    pageContacts: List[ContactEntry]


class MessageResponse(BaseModel):
    """Uniform body for confirmations and errors."""
    message: str
