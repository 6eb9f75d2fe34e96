import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


class StepClock:
    """Deterministic clock: every call is one second after the previous one."""

    def __init__(self, start: datetime = datetime(2025, 1, 1, 12, 0, 0)):
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + timedelta(seconds=1)
        return now


@pytest.fixture()
def clock():
    return StepClock()


@pytest.fixture()
def repo(clock):
    from user_api.repository.user_repo import InMemoryUserRepository
    return InMemoryUserRepository(clock=clock)


@pytest.fixture()
def client(repo):
    # Fresh app per test so no state leaks between tests
    from fastapi.testclient import TestClient
    from user_api.api import create_app
    from user_api.config import Settings
    return TestClient(create_app(Settings(), repo=repo))
