"""
Schemas module - Request/Response schemas for API endpoints.
"""
from student_api.schemas.schemas import Student, StudentPayload

__all__ = ["Student", "StudentPayload"]
