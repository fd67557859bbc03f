"""
Student Routes

GET /students - List all students
GET /students/{id} - Get one student
POST /students - Create student (server assigns id)
PUT /students/{id} - Update name/email/password
DELETE /students/{id} - Delete student

Error bodies are plain text (see the handlers in student_api.main).
"""

from fastapi import APIRouter, HTTPException, Depends, Response
from pymongo.errors import PyMongoError
from typing import List

from student_api.api.deps import get_student_service, get_student_payload
from student_api.schemas.schemas import Student, StudentPayload
from student_api.services.student_service import (
    StudentService, StudentNotFoundError, InvalidStudentIdError
)

router = APIRouter(prefix="/students", tags=["Students"])


@router.get("", response_model=List[Student])
def list_students(service: StudentService = Depends(get_student_service)):
    """All stored students; an empty array when there are none."""
    try:
        return service.list_students()
    except PyMongoError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{student_id}", response_model=Student)
def get_student(student_id: str, service: StudentService = Depends(get_student_service)):
    # Store failures on lookup are reported as not found, same as a miss
    try:
        return service.get_student(student_id)
    except (StudentNotFoundError, PyMongoError) as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", status_code=201)
def create_student(
    data: StudentPayload = Depends(get_student_payload),
    service: StudentService = Depends(get_student_service)
):
    """Create a student. Any client-supplied id is ignored."""
    try:
        service.create_student(data)
    except PyMongoError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return Response(status_code=201)


@router.put("/{student_id}")
def update_student(
    student_id: str,
    data: StudentPayload = Depends(get_student_payload),
    service: StudentService = Depends(get_student_service)
):
    """Set name/email/password. Succeeds even when no student matched."""
    try:
        service.update_student(student_id, data)
    except InvalidStudentIdError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PyMongoError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return Response(status_code=200)


@router.delete("/{student_id}")
def delete_student(student_id: str, service: StudentService = Depends(get_student_service)):
    """Delete a student. Deleting an unknown id is a no-op."""
    try:
        service.delete_student(student_id)
    except PyMongoError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return Response(status_code=200)
