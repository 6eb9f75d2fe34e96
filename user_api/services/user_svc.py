from __future__ import annotations

from typing import Any

from ..domain.user_rules import User, build_user
from ..logs import LogContext
from ..repository.user_repo import UserRepository


def list_users(repo: UserRepository) -> list[dict[str, Any]]:
    return [u.to_dict() for u in repo.get_all()]


def get_user(repo: UserRepository, user_id: int) -> dict[str, Any]:
    return repo.get_by_id(user_id).to_dict()


def create_user(repo: UserRepository, payload: dict[str, Any], log: LogContext) -> dict[str, Any]:
    # Validation runs before the repository is touched
    user: User = build_user(payload)
    created = repo.create(user).to_dict()
    log.set_entity("USER", created["id"])
    log.set_after(created)
    return created


def update_user(repo: UserRepository, user_id: int, payload: dict[str, Any], log: LogContext) -> dict[str, Any]:
    log.set_entity("USER", user_id)
    user = build_user(payload)
    log.set_before(repo.get_by_id(user_id).to_dict())
    updated = repo.update(user_id, user).to_dict()
    log.set_after(updated)
    return updated


def delete_user(repo: UserRepository, user_id: int, log: LogContext) -> None:
    log.set_entity("USER", user_id)
    log.set_before(repo.get_by_id(user_id).to_dict())
    repo.delete(user_id)
