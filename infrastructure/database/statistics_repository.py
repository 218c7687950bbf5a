"""
Supabase implementation of the statistics reads.
Only fetches rows and counts; grouping lives in StatisticsService.
"""

import asyncio
import logging
from datetime import datetime
from typing import Optional, List, Awaitable, TypeVar
from supabase import Client
from core.domain.models import BasicCounts
from core.domain.constants import (
    CLUBS_TABLE, CLUB_MEMBERS_TABLE, MATCHES_TABLE,
    MATCH_PARTICIPANTS_TABLE, PROFILES_TABLE, RPC_GET_BASIC_COUNTS,
)
from core.domain.errors import FetchError
from core.interfaces.repositories import IStatisticsRepository
from infrastructure.database.supabase_client import get_supabase, run_sync, BACKEND_ERRORS, error_text
from locales import t

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _read(table: str, pending: Awaitable[T]) -> T:
    """Await a backend read, reporting failures as FetchError"""
    try:
        return await pending
    except BACKEND_ERRORS as e:
        raise FetchError(t("statistics_read_failed", table=table, error=error_text(e))) from e


class SupabaseStatisticsRepository(IStatisticsRepository):
    """Supabase implementation of statistics reads"""

    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase()

    # === COUNTS ===

    @run_sync
    def _basic_counts_rpc_sync(self):
        return self.client.rpc(RPC_GET_BASIC_COUNTS).execute().data

    @run_sync
    def _count_sync(self, table: str, since: Optional[datetime] = None) -> int:
        query = self.client.table(table).select("id", count="exact")
        if since is not None:
            query = query.gte("created_at", since.isoformat())
        response = query.execute()
        return response.count or 0

    async def get_basic_counts(self) -> BasicCounts:
        try:
            payload = await self._basic_counts_rpc_sync()
        except BACKEND_ERRORS as e:
            logger.warning(f"RPC {RPC_GET_BASIC_COUNTS} not available, counting tables: {error_text(e)}")
        else:
            # Set-returning functions come back as a one-row list
            if isinstance(payload, list):
                payload = payload[0] if payload else {}
            return BasicCounts.model_validate(payload or {})

        users, clubs, matches, members, participants = await asyncio.gather(
            _read(PROFILES_TABLE, self._count_sync(PROFILES_TABLE)),
            _read(CLUBS_TABLE, self._count_sync(CLUBS_TABLE)),
            _read(MATCHES_TABLE, self._count_sync(MATCHES_TABLE)),
            _read(CLUB_MEMBERS_TABLE, self._count_sync(CLUB_MEMBERS_TABLE)),
            _read(MATCH_PARTICIPANTS_TABLE, self._count_sync(MATCH_PARTICIPANTS_TABLE)),
        )
        return BasicCounts(
            total_users=users,
            total_clubs=clubs,
            total_matches=matches,
            total_members=members,
            total_participants=participants,
        )

    async def count_since(self, table: str, since: datetime) -> int:
        return await _read(table, self._count_sync(table, since))

    # === MATCHES ===

    @run_sync
    def _select_column_sync(self, table: str, column: str) -> List[dict]:
        response = self.client.table(table).select(column).execute()
        return response.data if response.data else []

    async def get_match_statuses(self) -> List[Optional[str]]:
        rows = await _read(MATCHES_TABLE, self._select_column_sync(MATCHES_TABLE, "status"))
        return [row.get("status") for row in rows]

    async def get_match_participant_counts(self) -> List[Optional[int]]:
        rows = await _read(MATCHES_TABLE, self._select_column_sync(MATCHES_TABLE, "current_participants"))
        return [row.get("current_participants") for row in rows]

    @run_sync
    def _get_match_club_names_sync(self) -> List[dict]:
        # Inner join: matches whose club no longer exists are left out
        response = self.client.table(MATCHES_TABLE)\
            .select(f"club_id, {CLUBS_TABLE}!inner(name)")\
            .not_.is_("club_id", "null")\
            .execute()
        return response.data if response.data else []

    async def get_match_club_names(self) -> List[str]:
        rows = await _read(MATCHES_TABLE, self._get_match_club_names_sync())
        names = []
        for row in rows:
            club = row.get(CLUBS_TABLE) or {}
            names.append(club.get("name") or "Unknown")
        return names

    # === CLUBS ===

    @run_sync
    def _get_top_clubs_sync(self, limit: int) -> List[dict]:
        response = self.client.table(CLUBS_TABLE)\
            .select("name, member_count")\
            .not_.is_("member_count", "null")\
            .order("member_count", desc=True)\
            .limit(limit)\
            .execute()
        return response.data if response.data else []

    async def get_top_clubs_by_members(self, limit: int) -> List[dict]:
        return await _read(CLUBS_TABLE, self._get_top_clubs_sync(limit))

    # === TRENDS ===

    @run_sync
    def _get_creation_dates_sync(self, table: str, since: datetime) -> List[dict]:
        response = self.client.table(table)\
            .select("created_at")\
            .gte("created_at", since.isoformat())\
            .execute()
        return response.data if response.data else []

    async def get_creation_dates(self, table: str, since: datetime) -> List[str]:
        rows = await _read(table, self._get_creation_dates_sync(table, since))
        return [row["created_at"] for row in rows if row.get("created_at")]
