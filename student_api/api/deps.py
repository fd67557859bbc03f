"""
FastAPI dependencies shared by the route modules.
"""

from fastapi import HTTPException, Request
from pydantic import ValidationError

from student_api.schemas.schemas import StudentPayload, format_validation_errors
from student_api.services.student_service import StudentService


def get_student_service(request: Request) -> StudentService:
    """
    The StudentService attached to the app at startup (or injected by tests).
    Usage:
        @router.get("/students")
        def list_students(service: StudentService = Depends(get_student_service)):
            ...
    """
    service = getattr(request.app.state, "student_service", None)
    if service is None:
        raise HTTPException(status_code=500, detail="student store is not connected")
    return service


async def get_student_payload(request: Request) -> StudentPayload:
    """
    Decode the raw request body as a StudentPayload.
    The body is parsed as JSON whatever the Content-Type header says.
    """
    body = await request.body()
    try:
        return StudentPayload.model_validate_json(body)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=format_validation_errors(e.errors()))
