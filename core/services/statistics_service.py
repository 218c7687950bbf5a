"""
Statistics service - aggregates platform figures for the dashboard.

All reads are independent, so they are issued together and awaited jointly.
The time windows are computed from `now` on every call; nothing is cached.
"""

import asyncio
import logging
import math
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Optional, List, Iterable, Tuple
from core.domain.models import (
    PlatformStatistics, StatusCount, ClubMatchCount,
    ClubMemberCount, MonthlyCount,
)
from core.domain.constants import (
    MATCHES_TABLE, PROFILES_TABLE, TREND_MONTHS, TOP_CLUBS_LIMIT,
)
from core.domain.errors import AppError, StatisticsFetchError
from core.interfaces.repositories import IStatisticsRepository
from locales import t, month_label, DEFAULT_LANG

logger = logging.getLogger(__name__)


# === TIME WINDOWS ===

def start_of_month(now: datetime) -> datetime:
    return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def start_of_week(now: datetime) -> datetime:
    """Most recent Sunday at midnight (today if today is Sunday)"""
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    days_since_sunday = (now.weekday() + 1) % 7
    return midnight - timedelta(days=days_since_sunday)


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def trend_window_start(now: datetime, months: int = TREND_MONTHS) -> datetime:
    """First day of the oldest month shown in the trend charts"""
    year, month = shift_month(now.year, now.month, -(months - 1))
    return start_of_month(now).replace(year=year, month=month)


def parse_timestamp(value: str) -> datetime:
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


# === AGGREGATIONS ===

def build_monthly_histogram(
    timestamps: Iterable[str],
    now: datetime,
    months: int = TREND_MONTHS,
    lang: str = DEFAULT_LANG,
) -> List[MonthlyCount]:
    """
    Bucket creation timestamps by month.
    Always returns `months` entries, oldest first, ending with the month of `now`.
    """
    per_month = Counter()
    for value in timestamps:
        dt = parse_timestamp(value)
        per_month[(dt.year, dt.month)] += 1

    result = []
    for offset in range(months - 1, -1, -1):
        year, month = shift_month(now.year, now.month, -offset)
        result.append(MonthlyCount(
            month=month_label(year, month, lang),
            count=per_month.get((year, month), 0),
        ))
    return result


def count_by_status(statuses: Iterable[Optional[str]]) -> List[StatusCount]:
    return [StatusCount(status=status, count=count) for status, count in Counter(statuses).items()]


def count_by_club(club_names: Iterable[str]) -> List[ClubMatchCount]:
    return [ClubMatchCount(club_name=name, count=count) for name, count in Counter(club_names).items()]


def average_participants(values: List[Optional[int]]) -> float:
    """Mean rounded half-up to one decimal; 0 when there are no matches"""
    if not values:
        return 0.0
    mean = sum(v or 0 for v in values) / len(values)
    return math.floor(mean * 10 + 0.5) / 10


def top_clubs(rows: List[dict]) -> List[ClubMemberCount]:
    return [
        ClubMemberCount(club_name=row.get("name") or "", member_count=row.get("member_count") or 0)
        for row in rows
    ]


class StatisticsService:
    """Service for the statistics dashboard"""

    def __init__(self, stats_repo: IStatisticsRepository, lang: str = DEFAULT_LANG):
        self.stats_repo = stats_repo
        self.lang = lang

    async def get_statistics(self, now: Optional[datetime] = None) -> PlatformStatistics:
        """Compute a full snapshot. Any failed read aborts the whole snapshot."""
        now = now or datetime.now(timezone.utc)
        month_start = start_of_month(now)
        week_start = start_of_week(now)
        trend_start = trend_window_start(now)

        try:
            (
                counts,
                matches_this_month,
                matches_this_week,
                new_users_this_month,
                statuses,
                participants,
                club_names,
                top_club_rows,
                user_dates,
                match_dates,
            ) = await asyncio.gather(
                self.stats_repo.get_basic_counts(),
                self.stats_repo.count_since(MATCHES_TABLE, month_start),
                self.stats_repo.count_since(MATCHES_TABLE, week_start),
                self.stats_repo.count_since(PROFILES_TABLE, month_start),
                self.stats_repo.get_match_statuses(),
                self.stats_repo.get_match_participant_counts(),
                self.stats_repo.get_match_club_names(),
                self.stats_repo.get_top_clubs_by_members(TOP_CLUBS_LIMIT),
                self.stats_repo.get_creation_dates(PROFILES_TABLE, trend_start),
                self.stats_repo.get_creation_dates(MATCHES_TABLE, trend_start),
            )

            stats = PlatformStatistics(
                **counts.model_dump(),
                matches_this_month=matches_this_month,
                matches_this_week=matches_this_week,
                new_users_this_month=new_users_this_month,
                matches_by_status=count_by_status(statuses),
                matches_by_club=count_by_club(club_names),
                users_by_month=build_monthly_histogram(user_dates, now, lang=self.lang),
                matches_by_month=build_monthly_histogram(match_dates, now, lang=self.lang),
                average_participants_per_match=average_participants(participants),
                top_clubs_by_members=top_clubs(top_club_rows),
            )
        except (AppError, ValueError) as e:
            logger.error(f"Error fetching statistics: {e}")
            raise StatisticsFetchError(t("statistics_fetch_failed", self.lang)) from e

        logger.debug(
            f"[STATS] users={stats.total_users} clubs={stats.total_clubs} matches={stats.total_matches}"
        )
        return stats
