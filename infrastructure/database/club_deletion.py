"""
Club deletion strategies.

AtomicClubDeletion delegates the whole cascade to the delete_club_cascade RPC.
StepwiseClubDeletion removes dependents table by table, in foreign-key order,
for backends where that RPC is not installed. The stepwise path is not wrapped
in a transaction; deleting rows that are already gone is not an error, so a
partially applied cascade can simply be run again.
"""

import logging
from typing import List
from uuid import UUID
from supabase import Client
from core.domain.constants import (
    CLUBS_TABLE, CLUB_MEMBERS_TABLE, USER_CLUBS_TABLE,
    MATCHES_TABLE, MATCH_PARTICIPANTS_TABLE, PROFILES_TABLE,
    RPC_DELETE_CLUB_CASCADE, RPC_NULLIFY_PREFERRED_CLUB,
)
from core.domain.errors import ClubDeletionError
from core.interfaces.repositories import IClubDeletionStrategy
from infrastructure.database.supabase_client import run_sync, BACKEND_ERRORS, error_text
from locales import t

logger = logging.getLogger(__name__)


class AtomicClubDeletion(IClubDeletionStrategy):
    """Server-side cascade in a single RPC call"""

    name = "atomic"

    def __init__(self, client: Client):
        self.client = client

    @run_sync
    def _delete_sync(self, club_id: UUID) -> None:
        self.client.rpc(RPC_DELETE_CLUB_CASCADE, {"club_id": str(club_id)}).execute()

    async def delete(self, club_id: UUID) -> None:
        await self._delete_sync(club_id)


class StepwiseClubDeletion(IClubDeletionStrategy):
    """Client-side cascade, one table at a time"""

    name = "stepwise"

    def __init__(self, client: Client):
        self.client = client

    # === Step 1: best effort ===

    @run_sync
    def _nullify_preferred_club_sync(self, club_id: UUID) -> None:
        try:
            self.client.rpc(RPC_NULLIFY_PREFERRED_CLUB, {"target_club_id": str(club_id)}).execute()
            return
        except BACKEND_ERRORS as e:
            logger.warning(
                f"RPC {RPC_NULLIFY_PREFERRED_CLUB} not available, trying direct update: {error_text(e)}"
            )

        # Row level security may reject this; the FK constraint is left to the database
        try:
            self.client.table(PROFILES_TABLE)\
                .update({"preferred_club_id": None})\
                .eq("preferred_club_id", str(club_id))\
                .execute()
        except BACKEND_ERRORS as e:
            logger.warning(f"Could not update all profiles, continuing with deletion: {error_text(e)}")

    # === Steps 2-7: terminal on error ===

    @run_sync
    def _delete_user_clubs_sync(self, club_id: UUID) -> None:
        self.client.table(USER_CLUBS_TABLE).delete().eq("club_id", str(club_id)).execute()

    @run_sync
    def _get_match_ids_sync(self, club_id: UUID) -> List[str]:
        response = self.client.table(MATCHES_TABLE).select("id").eq("club_id", str(club_id)).execute()
        return [row["id"] for row in response.data or []]

    @run_sync
    def _delete_match_participants_sync(self, match_ids: List[str]) -> None:
        self.client.table(MATCH_PARTICIPANTS_TABLE).delete().in_("match_id", match_ids).execute()

    @run_sync
    def _delete_matches_sync(self, club_id: UUID) -> None:
        self.client.table(MATCHES_TABLE).delete().eq("club_id", str(club_id)).execute()

    @run_sync
    def _delete_club_members_sync(self, club_id: UUID) -> None:
        self.client.table(CLUB_MEMBERS_TABLE).delete().eq("club_id", str(club_id)).execute()

    @run_sync
    def _delete_club_sync(self, club_id: UUID) -> None:
        self.client.table(CLUBS_TABLE).delete().eq("id", str(club_id)).execute()

    async def _run_stage(self, stage: str, step, *args):
        try:
            return await step(*args)
        except BACKEND_ERRORS as e:
            message = t(f"delete_stage_{stage}", error=error_text(e))
            logger.error(f"[CLUB_DELETE] stage '{stage}' failed: {error_text(e)}")
            raise ClubDeletionError(stage, message) from e

    async def delete(self, club_id: UUID) -> None:
        await self._nullify_preferred_club_sync(club_id)

        await self._run_stage("user_clubs", self._delete_user_clubs_sync, club_id)

        match_ids = await self._run_stage("match_lookup", self._get_match_ids_sync, club_id)
        if match_ids:
            await self._run_stage("match_participants", self._delete_match_participants_sync, match_ids)

        await self._run_stage("matches", self._delete_matches_sync, club_id)
        await self._run_stage("club_members", self._delete_club_members_sync, club_id)
        await self._run_stage("club", self._delete_club_sync, club_id)

        logger.info(f"[CLUB_DELETE] stepwise cascade completed for club {club_id} ({len(match_ids)} matches)")
