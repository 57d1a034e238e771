"""
API models and schemas for the FastAPI application.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Book(BaseModel):
    """A single catalog entry.

    Decoding is lenient: a ``null`` document or ``null`` field gives empty
    strings, missing fields are empty, unknown fields are ignored and keys
    match case-insensitively (an exact match wins). Non-string values are
    still rejected.
    """
    model_config = ConfigDict(extra="ignore")

    id: str = Field("", description="Book identifier")
    title: str = Field("", description="Book title")

    @model_validator(mode="before")
    @classmethod
    def normalize_document(cls, data):
        """Map a null document to an empty book and fold key case."""
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        normalized = {}
        for key, value in data.items():
            name = key.lower() if isinstance(key, str) else key
            if name in cls.model_fields and (key == name or name not in data):
                normalized[name] = value
        return normalized

    @field_validator("id", "title", mode="before")
    @classmethod
    def null_to_empty(cls, v):
        """Treat null field values as empty strings."""
        return "" if v is None else v


DEFAULT_BOOKS = (
    Book(id="1", title="1984"),
    Book(id="2", title="Brave New World"),
    Book(id="3", title="To Kill a Mockingbird"),
    Book(id="4", title="The Great Gatsby"),
    Book(id="5", title="Moby Dick"),
)


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(..., description="Current timestamp")
    version: str = Field(..., description="API version")
    book_count: int = Field(..., description="Number of books currently stored")
