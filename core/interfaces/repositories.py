"""
Repository interfaces - abstractions for data access.
This allows swapping implementations (Supabase -> PostgreSQL, in-memory fakes, etc.)
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, List
from uuid import UUID
from core.domain.models import (
    Club, ClubCreate, ClubUpdate,
    BasicCounts,
)


class IClubRepository(ABC):
    """Interface for club data access"""

    @abstractmethod
    async def list_all(self) -> List[Club]:
        """Get all clubs, newest first"""
        pass

    @abstractmethod
    async def create(self, club_data: ClubCreate, owner_id: Optional[UUID]) -> Club:
        """Create a club and register owner_id as its owner"""
        pass

    @abstractmethod
    async def update(self, club_id: UUID, club_data: ClubUpdate) -> Club:
        """Apply the supplied fields to a club"""
        pass

    @abstractmethod
    async def delete(self, club_id: UUID, actor_id: Optional[UUID]) -> None:
        """Delete a club with its matches, participants and memberships"""
        pass


class IClubDeletionStrategy(ABC):
    """One way of removing a club and everything that references it"""

    name: str = "base"

    @abstractmethod
    async def delete(self, club_id: UUID) -> None:
        pass


class IStatisticsRepository(ABC):
    """Raw reads behind the statistics dashboard"""

    @abstractmethod
    async def get_basic_counts(self) -> BasicCounts:
        """Totals for users, clubs, matches, club members and match participants"""
        pass

    @abstractmethod
    async def count_since(self, table: str, since: datetime) -> int:
        """Exact number of rows created at or after `since`"""
        pass

    @abstractmethod
    async def get_match_statuses(self) -> List[Optional[str]]:
        pass

    @abstractmethod
    async def get_match_participant_counts(self) -> List[Optional[int]]:
        """current_participants of every match"""
        pass

    @abstractmethod
    async def get_match_club_names(self) -> List[str]:
        """Club name of every match attached to an existing club"""
        pass

    @abstractmethod
    async def get_top_clubs_by_members(self, limit: int) -> List[dict]:
        """Rows of {name, member_count}, biggest clubs first"""
        pass

    @abstractmethod
    async def get_creation_dates(self, table: str, since: datetime) -> List[str]:
        """created_at values (ISO strings) at or after `since`"""
        pass


class IAuthGateway(ABC):
    """Resolves access tokens issued by the auth backend"""

    @abstractmethod
    async def get_user_id(self, access_token: str) -> Optional[UUID]:
        """User behind the token, or None when the token is invalid"""
        pass
