from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, StrictInt

from ..domain.user_rules import NotFoundError, ValidationError
from ..logs import LogContext
from ..repository.user_repo import UserRepository
from ..services.stats_svc import compute_user_stats
from ..services.user_svc import create_user, delete_user, get_user, list_users, update_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/users")


class UserIn(BaseModel):
    name: str
    email: str
    age: StrictInt


def get_repo(request: Request) -> UserRepository:
    return request.app.state.user_repo


def _fail(status: int, error: str, message: str) -> HTTPException:
    return HTTPException(status_code=status, detail={"error": error, "message": message})


@router.get("")
def api_users_list(repo: UserRepository = Depends(get_repo)):
    try:
        items = list_users(repo)
        return {"success": True, "data": items, "total": len(items)}
    except Exception as e:
        logger.exception("list users failed")
        raise _fail(500, "Internal server error", str(e))


@router.get("/stats")
def api_users_stats(repo: UserRepository = Depends(get_repo)):
    try:
        stats = compute_user_stats(repo)
        return {
            "success": True,
            "message": "User statistics retrieved successfully",
            "data": stats.to_dict(),
        }
    except Exception as e:
        logger.exception("user stats failed")
        raise _fail(500, "Failed to retrieve users", str(e))


@router.get("/{user_id}")
def api_user_get(user_id: int, repo: UserRepository = Depends(get_repo)):
    try:
        return {"success": True, "data": get_user(repo, user_id)}
    except NotFoundError as e:
        raise _fail(404, "User not found", str(e))
    except Exception as e:
        logger.exception("get user failed")
        raise _fail(500, "Internal server error", str(e))


@router.post("", status_code=201)
def api_user_create(body: UserIn, repo: UserRepository = Depends(get_repo)):
    log = LogContext("CREATE_USER")
    log.set_payload(body.model_dump())
    try:
        data = create_user(repo, body.model_dump(), log)
        log.write("OK")
        return {"success": True, "message": "User created successfully", "data": data}
    except ValidationError as e:
        log.write("ERROR", str(e))
        raise _fail(400, "Validation failed", str(e))
    except Exception as e:
        log.write("ERROR", "internal error")
        logger.exception("create user failed")
        raise _fail(500, "Error creating user", str(e))


@router.put("/{user_id}")
def api_user_update(user_id: int, body: UserIn, repo: UserRepository = Depends(get_repo)):
    log = LogContext("UPDATE_USER")
    log.set_payload(body.model_dump())
    try:
        data = update_user(repo, user_id, body.model_dump(), log)
        log.write("OK")
        return {"success": True, "message": "User updated successfully", "data": data}
    except ValidationError as e:
        log.write("ERROR", str(e))
        raise _fail(400, "Validation failed", str(e))
    except NotFoundError as e:
        log.write("ERROR", str(e))
        raise _fail(404, "User not found", str(e))
    except Exception as e:
        log.write("ERROR", "internal error")
        logger.exception("update user failed")
        raise _fail(500, "Internal server error", str(e))


@router.delete("/{user_id}")
def api_user_delete(user_id: int, repo: UserRepository = Depends(get_repo)):
    log = LogContext("DELETE_USER")
    try:
        delete_user(repo, user_id, log)
        log.write("OK")
        return {"success": True, "message": "User deleted successfully"}
    except NotFoundError as e:
        log.write("ERROR", str(e))
        raise _fail(404, "User not found", str(e))
    except Exception as e:
        log.write("ERROR", "internal error")
        logger.exception("delete user failed")
        raise _fail(500, "Internal server error", str(e))
