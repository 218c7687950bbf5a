"""
Supabase implementation of Club repository.
"""

import logging
from typing import Optional, List
from uuid import UUID
from postgrest.exceptions import APIError
from supabase import Client
from core.domain.models import (
    Club, ClubCreate, ClubUpdate, ClubMembership,
    MembershipRole, MembershipStatus,
)
from core.domain.constants import (
    CLUBS_TABLE, CLUB_MEMBERS_TABLE, LOCATION_PLACEHOLDER,
    RPC_DELETE_CLUB_CASCADE, POSTGREST_MISSING_FUNCTION,
)
from core.domain.errors import AuthError, FetchError, WriteError, NotFoundError
from core.interfaces.repositories import IClubRepository, IClubDeletionStrategy
from infrastructure.database.club_deletion import AtomicClubDeletion, StepwiseClubDeletion
from infrastructure.database.supabase_client import get_supabase, run_sync, BACKEND_ERRORS, error_text
from locales import t

logger = logging.getLogger(__name__)


def _location_or_placeholder(location: Optional[str]) -> str:
    if location is None or not location.strip():
        return LOCATION_PLACEHOLDER
    return location


class SupabaseClubRepository(IClubRepository):
    """Supabase implementation of club repository"""

    def __init__(
        self,
        client: Optional[Client] = None,
        atomic_deletion: Optional[IClubDeletionStrategy] = None,
        stepwise_deletion: Optional[IClubDeletionStrategy] = None,
    ):
        self.client = client or get_supabase()
        self.atomic_deletion = atomic_deletion or AtomicClubDeletion(self.client)
        self.stepwise_deletion = stepwise_deletion or StepwiseClubDeletion(self.client)
        # Flipped off once the backend reports the cascade RPC as missing
        self.atomic_available = True

    def _to_model(self, data: dict) -> Club:
        """Convert database row to Club model"""
        return Club(
            id=data["id"],
            name=data["name"],
            location=data.get("location") or LOCATION_PLACEHOLDER,
            address=data.get("address"),
            phone=data.get("phone"),
            email=data.get("email"),
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            member_count=data.get("member_count"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    # === LIST ===

    @run_sync
    def _list_all_sync(self) -> List[dict]:
        response = self.client.table(CLUBS_TABLE).select("*")\
            .order("created_at", desc=True)\
            .execute()
        return response.data if response.data else []

    async def list_all(self) -> List[Club]:
        try:
            data = await self._list_all_sync()
        except BACKEND_ERRORS as e:
            raise FetchError(t("clubs_fetch_failed", error=error_text(e))) from e
        return [self._to_model(d) for d in data]

    # === CREATE ===

    @run_sync
    def _insert_club_sync(self, data: dict) -> Optional[dict]:
        response = self.client.table(CLUBS_TABLE).insert(data).execute()
        return response.data[0] if response.data else None

    @run_sync
    def _insert_membership_sync(self, membership: ClubMembership) -> None:
        self.client.table(CLUB_MEMBERS_TABLE).insert(membership.model_dump(mode="json")).execute()

    async def create(self, club_data: ClubCreate, owner_id: Optional[UUID]) -> Club:
        if owner_id is None:
            raise AuthError(t("auth_required"))

        data = club_data.model_dump(mode="json", exclude_none=True)
        data["location"] = _location_or_placeholder(data.get("location"))

        try:
            row = await self._insert_club_sync(data)
        except BACKEND_ERRORS as e:
            raise WriteError(t("club_create_failed", error=error_text(e))) from e
        if not row:
            raise WriteError(t("club_create_failed", error="no row returned"))

        club = self._to_model(row)

        membership = ClubMembership(
            club_id=club.id,
            user_id=owner_id,
            role=MembershipRole.OWNER,
            status=MembershipStatus.ACTIVE,
        )
        try:
            await self._insert_membership_sync(membership)
        except BACKEND_ERRORS as e:
            # The club exists; the missing owner link is reported but not rolled back
            logger.error(f"Failed to add creator {owner_id} as owner of club {club.id}: {error_text(e)}")

        logger.info(f"[CLUBS] created club {club.id} '{club.name}' (owner {owner_id})")
        return club

    # === UPDATE ===

    @run_sync
    def _update_sync(self, club_id: UUID, changes: dict) -> Optional[dict]:
        response = self.client.table(CLUBS_TABLE)\
            .update(changes)\
            .eq("id", str(club_id))\
            .execute()
        return response.data[0] if response.data else None

    @run_sync
    def _get_by_id_sync(self, club_id: UUID) -> Optional[dict]:
        response = self.client.table(CLUBS_TABLE).select("*").eq("id", str(club_id)).execute()
        return response.data[0] if response.data else None

    async def update(self, club_id: UUID, club_data: ClubUpdate) -> Club:
        changes = club_data.changes()
        if "location" in changes:
            changes["location"] = _location_or_placeholder(changes["location"])

        try:
            if changes:
                row = await self._update_sync(club_id, changes)
            else:
                row = await self._get_by_id_sync(club_id)
        except BACKEND_ERRORS as e:
            raise WriteError(t("club_update_failed", error=error_text(e))) from e

        if not row:
            raise NotFoundError(t("club_not_found", club_id=club_id))
        return self._to_model(row)

    # === DELETE ===

    async def delete(self, club_id: UUID, actor_id: Optional[UUID]) -> None:
        if actor_id is None:
            raise AuthError(t("auth_required"))

        if self.atomic_available:
            try:
                await self.atomic_deletion.delete(club_id)
                logger.info(f"[CLUBS] club {club_id} deleted by {actor_id} ({self.atomic_deletion.name})")
                return
            except BACKEND_ERRORS as e:
                if isinstance(e, APIError) and e.code == POSTGREST_MISSING_FUNCTION:
                    self.atomic_available = False
                logger.warning(
                    f"RPC {RPC_DELETE_CLUB_CASCADE} failed for club {club_id}, "
                    f"falling back to stepwise deletion: {error_text(e)}"
                )

        await self.stepwise_deletion.delete(club_id)
        logger.info(f"[CLUBS] club {club_id} deleted by {actor_id} ({self.stepwise_deletion.name})")
