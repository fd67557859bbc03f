"""
Pydantic Schemas - Request/Response Validation

Only type decoding happens here: strings stay unconstrained, missing
fields default to "" and unknown keys (including a client "id") are ignored.
"""

from pydantic import BaseModel, field_validator
from typing import Any, Iterable


def format_validation_errors(errors: Iterable[dict]) -> str:
    """Flatten pydantic errors into one line, e.g. "name: Input should be a valid string"."""
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts)


class StudentPayload(BaseModel):
    """Body of POST /students and PUT /students/{id}."""
    name: str = ""
    email: str = ""
    password: str = ""

    @field_validator("name", "email", "password", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        # JSON null leaves the field at its zero value
        return "" if value is None else value

    def to_fields(self) -> dict:
        """The mutable fields, as stored in MongoDB."""
        return {"name": self.name, "email": self.email, "password": self.password}


class Student(StudentPayload):
    """A stored student as returned by the API."""
    id: str

    @classmethod
    def from_document(cls, doc: dict) -> "Student":
        """
        Decode a MongoDB document ({"_id": ..., "name": ...}).
        Raises pydantic.ValidationError when the document doesn't fit.
        """
        fields = {k: v for k, v in doc.items() if k != "_id"}
        fields["id"] = doc.get("_id")
        return cls.model_validate(fields)

    def to_document(self) -> dict:
        doc = {"_id": self.id}
        doc.update(self.to_fields())
        return doc
