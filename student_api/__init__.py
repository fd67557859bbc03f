"""
Student Records API
A small CRUD service over a single MongoDB collection.

Architecture:
- FastAPI: HTTP routing and JSON (de)serialization
- MongoDB: Student documents, one collection
- No auth, no pagination - every request maps to one database call
"""

__version__ = "1.0.0"
