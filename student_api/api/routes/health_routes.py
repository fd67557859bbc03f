"""
Health Routes

GET /health - Liveness plus MongoDB reachability
"""

from fastapi import APIRouter, Request

from student_api.db.mongodb import test_mongo_connection

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(request: Request):
    """Detailed health check."""
    client = getattr(request.app.state, "mongo_client", None)
    connected = client is not None and test_mongo_connection(client)
    return {
        "status": "healthy",
        "mongodb": "connected" if connected else "disconnected"
    }
