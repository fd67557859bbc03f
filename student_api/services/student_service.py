"""
Student Service - CRUD operations for the students collection.

Each method performs exactly one MongoDB call. Store errors
(pymongo.errors.PyMongoError) are not caught here; the routes
decide which status code they map to.

Identifiers: every student _id is the 24-char hex string of a fresh
ObjectId, and every filter matches on that string.
"""

from typing import List
from bson import ObjectId
from pydantic import ValidationError
from pymongo.collection import Collection

from student_api.core.log import get_logger
from student_api.schemas.schemas import Student, StudentPayload

logger = get_logger(__name__)

# Error text for a find_one that matched nothing
NO_DOCUMENTS_MESSAGE = "mongo: no documents in result"


class StudentNotFoundError(LookupError):
    """No stored document matches the requested id."""


class InvalidStudentIdError(ValueError):
    """The id is not a well-formed ObjectId hex string."""

    def __init__(self, student_id: str):
        super().__init__("Invalid student ID")
        self.student_id = student_id


def new_student_id() -> str:
    """Fresh globally-unique id: a random ObjectId rendered as hex."""
    return str(ObjectId())


class StudentService:
    """
    Handles student document storage.
    The collection is injected so tests can substitute an in-memory one.
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    def list_students(self) -> List[Student]:
        """
        Fetch every student (empty filter, store order).
        Documents that fail to decode are logged and skipped.
        """
        students = []
        with self.collection.find({}) as cursor:
            for doc in cursor:
                try:
                    students.append(Student.from_document(doc))
                except ValidationError as e:
                    logger.warning("Skipping student document %r: %s", doc.get("_id"), e)
        return students

    def get_student(self, student_id: str) -> Student:
        """
        Fetch one student by id.
        Raises StudentNotFoundError if nothing matches or the document doesn't decode.
        """
        doc = self.collection.find_one({"_id": student_id})
        if doc is None:
            raise StudentNotFoundError(NO_DOCUMENTS_MESSAGE)
        try:
            return Student.from_document(doc)
        except ValidationError as e:
            raise StudentNotFoundError(str(e)) from e

    def create_student(self, payload: StudentPayload) -> Student:
        """Insert a new student under a server-assigned id."""
        student = Student(id=new_student_id(), **payload.to_fields())
        self.collection.insert_one(student.to_document())
        return student

    def update_student(self, student_id: str, payload: StudentPayload) -> int:
        """
        Overwrite name/email/password of the matching student.
        Returns the matched count; 0 is not an error.
        """
        if not ObjectId.is_valid(student_id):
            raise InvalidStudentIdError(student_id)
        # Stored ids are lowercase hex; accept any casing the format allows
        result = self.collection.update_one(
            {"_id": str(ObjectId(student_id))},
            {"$set": payload.to_fields()}
        )
        return result.matched_count

    def delete_student(self, student_id: str) -> int:
        """Delete the matching student. Returns the deleted count; 0 is not an error."""
        result = self.collection.delete_one({"_id": student_id})
        return result.deleted_count
