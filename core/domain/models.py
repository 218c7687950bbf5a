"""
Domain models - the core of business logic.
These models are transport-agnostic (work with the web API, scripts, tests, etc.)
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, List
from datetime import datetime
from uuid import UUID
from enum import Enum


# === ENUMS ===

class MembershipRole(str, Enum):
    OWNER = "owner"
    MEMBER = "member"


class MembershipStatus(str, Enum):
    ACTIVE = "active"
    PENDING = "pending"


class PlacesStatus(str, Enum):
    """Lifecycle of the places lookup: idle -> loading -> ready | error"""
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


# === CLUB ===

def _check_coordinates_pair(latitude: Optional[float], longitude: Optional[float]):
    if (latitude is None) != (longitude is None):
        raise ValueError("latitude and longitude must be provided together")


class ClubBase(BaseModel):
    """Club fields editable from the back office"""
    name: str
    location: str = ""  # "City, Country" label
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class ClubCreate(ClubBase):
    """Data for creating a new club"""

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name is required")
        return v

    @model_validator(mode="after")
    def coordinates_paired(self):
        _check_coordinates_pair(self.latitude, self.longitude)
        return self


class ClubUpdate(BaseModel):
    """Partial club update - only explicitly set fields are written"""
    name: Optional[str] = None
    location: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            raise ValueError("name cannot be null")
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v

    @model_validator(mode="after")
    def coordinates_paired(self):
        supplied = self.model_fields_set
        if ("latitude" in supplied) != ("longitude" in supplied):
            raise ValueError("latitude and longitude must be updated together")
        _check_coordinates_pair(self.latitude, self.longitude)
        return self

    def changes(self) -> dict:
        """Fields the caller actually supplied"""
        return self.model_dump(mode="json", exclude_unset=True)


class Club(ClubBase):
    """Full club model as stored in the clubs table"""
    id: UUID
    location: str
    member_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("member_count", mode="before")
    @classmethod
    def default_member_count(cls, v):
        return 0 if v is None else v


class ClubMembership(BaseModel):
    """Link between a user and a club"""
    club_id: UUID
    user_id: UUID
    role: MembershipRole = MembershipRole.MEMBER
    status: MembershipStatus = MembershipStatus.ACTIVE


# === STATISTICS ===

class BasicCounts(BaseModel):
    """Entity totals. Accepts the camelCase payload of the get_basic_counts RPC."""
    total_users: int = Field(default=0, alias="totalUsers")
    total_clubs: int = Field(default=0, alias="totalClubs")
    total_matches: int = Field(default=0, alias="totalMatches")
    total_members: int = Field(default=0, alias="totalMembers")
    total_participants: int = Field(default=0, alias="totalParticipants")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def null_is_zero(cls, v):
        return 0 if v is None else v


class StatusCount(BaseModel):
    status: Optional[str] = None
    count: int


class ClubMatchCount(BaseModel):
    club_name: str
    count: int


class ClubMemberCount(BaseModel):
    club_name: str
    member_count: int


class MonthlyCount(BaseModel):
    month: str  # display label, e.g. "janv. 2026"
    count: int


class PlatformStatistics(BaseModel):
    """Snapshot rendered by the statistics dashboard"""
    total_users: int
    total_clubs: int
    total_matches: int
    total_members: int
    total_participants: int
    matches_this_month: int
    matches_this_week: int
    new_users_this_month: int
    matches_by_status: List[StatusCount] = Field(default_factory=list)
    matches_by_club: List[ClubMatchCount] = Field(default_factory=list)
    users_by_month: List[MonthlyCount] = Field(default_factory=list)
    matches_by_month: List[MonthlyCount] = Field(default_factory=list)
    average_participants_per_match: float = 0.0
    top_clubs_by_members: List[ClubMemberCount] = Field(default_factory=list)


# === PLACES ===

class PlaceSuggestion(BaseModel):
    """One address prediction"""
    label: str
    secondary_label: Optional[str] = None
    place_id: str


class PlaceLocation(BaseModel):
    """Resolved place: display label and coordinates"""
    label: str
    latitude: float
    longitude: float


class PlaceSearchResult(BaseModel):
    """Suggestions plus an inline status; never raised, always renderable"""
    status: PlacesStatus
    suggestions: List[PlaceSuggestion] = Field(default_factory=list)
    error: Optional[str] = None


class PlaceSelectResult(BaseModel):
    """Outcome of resolving a suggestion; location is None when it failed"""
    status: PlacesStatus
    location: Optional[PlaceLocation] = None
    error: Optional[str] = None
