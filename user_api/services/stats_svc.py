"""
Point-in-time summary over every stored user: count, age extremes, mean age
and a four-bucket age histogram.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional
import logging

from ..repository.user_repo import UserRepository

logger = logging.getLogger(__name__)

GENERATED_AT_FORMAT = "%Y-%m-%d %H:%M:%S"

# Ages outside the explicit ranges, including those under 18, fall into "51+"
AGE_BUCKETS = (
    ("18-25", 18, 25),
    ("26-35", 26, 35),
    ("36-50", 36, 50),
)
DEFAULT_BUCKET = "51+"


def empty_age_ranges() -> Dict[str, int]:
    out = {label: 0 for label, _, _ in AGE_BUCKETS}
    out[DEFAULT_BUCKET] = 0
    return out


def age_bucket(age: int) -> str:
    for label, lo, hi in AGE_BUCKETS:
        if lo <= age <= hi:
            return label
    return DEFAULT_BUCKET


@dataclass
class UserStats:
    total_users: int = 0
    average_age: float = 0.0
    min_age: int = 0
    max_age: int = 0
    age_ranges: Dict[str, int] = field(default_factory=empty_age_ranges)
    generated_at: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_users": self.total_users,
            "average_age": self.average_age,
            "min_age": self.min_age,
            "max_age": self.max_age,
            "age_ranges": dict(self.age_ranges),
            "generated_at": self.generated_at,
        }


def compute_user_stats(repo: UserRepository, now: Optional[datetime] = None) -> UserStats:
    users = repo.get_all()
    stats = UserStats(generated_at=(now or datetime.now()).strftime(GENERATED_AT_FORMAT))

    total_age = 0
    for u in users:
        if stats.total_users == 0:
            stats.min_age = stats.max_age = u.age
        else:
            stats.min_age = min(stats.min_age, u.age)
            stats.max_age = max(stats.max_age, u.age)
        stats.total_users += 1
        total_age += u.age
        stats.age_ranges[age_bucket(u.age)] += 1

    if stats.total_users > 0:
        stats.average_age = total_age / stats.total_users

    logger.debug("user stats computed: total=%d avg=%.2f", stats.total_users, stats.average_age)
    return stats
