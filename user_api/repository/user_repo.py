from __future__ import annotations

import abc
import threading
from dataclasses import replace
from datetime import datetime
from typing import Callable

from ..domain.user_rules import NotFoundError, User


class UserRepository(abc.ABC):
    """Storage contract for user records, used by services and the stats report."""

    @abc.abstractmethod
    def get_all(self) -> list[User]:
        raise NotImplementedError

    @abc.abstractmethod
    def get_by_id(self, user_id: int) -> User:
        raise NotImplementedError

    @abc.abstractmethod
    def create(self, user: User) -> User:
        raise NotImplementedError

    @abc.abstractmethod
    def update(self, user_id: int, user: User) -> User:
        raise NotImplementedError

    @abc.abstractmethod
    def delete(self, user_id: int) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def count(self) -> int:
        raise NotImplementedError


class InMemoryUserRepository(UserRepository):
    """
    List-backed repository. Records are lost when the process exits.

    Ids come from a counter that starts at 1 and only moves forward, so ids
    of deleted users are never handed out again. Every operation runs under
    one lock because request handlers execute on a thread pool.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._users: list[User] = []
        self._next_id = 1
        self._clock = clock
        self._lock = threading.Lock()

    def _index_of(self, user_id: int) -> int:
        for i, u in enumerate(self._users):
            if u.id == user_id:
                return i
        raise NotFoundError(user_id)

    def get_all(self) -> list[User]:
        with self._lock:
            return list(self._users)

    def get_by_id(self, user_id: int) -> User:
        with self._lock:
            return self._users[self._index_of(user_id)]

    def create(self, user: User) -> User:
        with self._lock:
            now = self._clock()
            stored = replace(user, id=self._next_id, created_at=now, updated_at=now)
            self._users.append(stored)
            self._next_id += 1
            return stored

    def update(self, user_id: int, user: User) -> User:
        with self._lock:
            i = self._index_of(user_id)
            current = self._users[i]
            stored = replace(
                current,
                name=user.name,
                email=user.email,
                age=user.age,
                updated_at=self._clock(),
            )
            self._users[i] = stored
            return stored

    def delete(self, user_id: int) -> None:
        with self._lock:
            del self._users[self._index_of(user_id)]

    def count(self) -> int:
        with self._lock:
            return len(self._users)
