"""
Distance leaderboards.

Two rankings are computed on every request, nothing is stored:

- global: every alive user, ranked by the precomputed grand total of the
  distance unit. Users without a total rank with 0.
- current month: only users with activity logged in the current calendar
  month, ranked by the sum of `distance` over those logs.

Both are sorted by metric descending, ties broken by user id ascending.
"""
import logging
from dataclasses import dataclass, asdict
from typing import Optional
from django.conf import settings
from activities.payload import MalformedActivityPayload, activity_distance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserSummary:
    id: int
    name: str
    headshot: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    address: Optional[str] = None


@dataclass(frozen=True)
class LeaderboardEntry:
    id: int
    name: str
    headshot: Optional[str]
    city: Optional[str]
    country: Optional[str]
    address: Optional[str]
    metric: float

    @classmethod
    def for_user(cls, user: UserSummary, metric: float) -> "LeaderboardEntry":
        return cls(
            id=user.id,
            name=user.name,
            headshot=user.headshot,
            city=user.city,
            country=user.country,
            address=user.address,
            metric=metric,
        )

    def as_dict(self) -> dict:
        return asdict(self)


def order_entries(entries):
    return sorted(entries, key=lambda e: (-e.metric, e.id))


class RankingEngine:
    def __init__(self, repository=None, distance_unit: Optional[str] = None):
        if repository is None:
            from .repository import RankingRepository
            repository = RankingRepository()
        self.repository = repository
        self.distance_unit = distance_unit or settings.LEADERBOARD_DISTANCE_UNIT

    def compute_global_ranking(self) -> list[LeaderboardEntry]:
        users = self.repository.fetch_users_with_profiles()

        unit_id = self.repository.resolve_unit_id(self.distance_unit)
        if unit_id is None:
            logger.warning(
                f"Unit '{self.distance_unit}' not found, global ranking falls back to zero for all users"
            )
            totals = {}
        else:
            totals = self.repository.fetch_unit_totals(unit_id)

        entries = [
            LeaderboardEntry.for_user(user, float(totals.get(user.id) or 0))
            for user in users
        ]
        return order_entries(entries)

    def compute_current_month_ranking(self, now=None) -> list[LeaderboardEntry]:
        grouped = self.repository.fetch_current_month_activity_logs(now)

        entries = []
        skipped = 0
        for user_id, (user, payloads) in grouped.items():
            distance = 0.0
            for payload in payloads:
                try:
                    distance += activity_distance(payload)
                except MalformedActivityPayload as e:
                    skipped += 1
                    logger.warning(f"Skipping activity payload of user {user_id}: {e}")
            entries.append(LeaderboardEntry.for_user(user, distance))

        if skipped:
            logger.warning(f"Monthly ranking skipped {skipped} malformed activity payload(s)")
        return order_entries(entries)
