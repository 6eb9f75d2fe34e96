from fastapi import APIRouter

from ..config import APP_NAME, APP_VERSION

router = APIRouter()

ENDPOINTS = {
    "health": "GET /health",
    "users": "GET /api/v1/users",
    "userStats": "GET /api/v1/users/stats",
    "user": "GET /api/v1/users/:id",
    "createUser": "POST /api/v1/users",
    "updateUser": "PUT /api/v1/users/:id",
    "deleteUser": "DELETE /api/v1/users/:id",
}


@router.get("/")
def index():
    return {
        "message": "Welcome to the user records API!",
        "version": APP_VERSION,
        "endpoints": ENDPOINTS,
    }

@router.get("/health")
def health():
    return {"success": True, "message": "API is working correctly", "version": APP_VERSION}

@router.get("/version")
def version():
    return {"app": APP_NAME, "version": APP_VERSION}
