"""
Pytest configuration and fixtures for Club Admin tests
"""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from tests.fakes import FakeSupabase  # noqa: E402
from infrastructure.database.club_repository import SupabaseClubRepository  # noqa: E402
from infrastructure.database.statistics_repository import SupabaseStatisticsRepository  # noqa: E402

OWNER_ID = "6f1c2b9e-8a4d-4c3e-9b7a-1d2e3f4a5b6c"


@pytest.fixture(scope="function")
def fake_db():
    """Empty in-memory Supabase"""
    return FakeSupabase()


@pytest.fixture(scope="function")
def club_repo(fake_db):
    return SupabaseClubRepository(fake_db)


@pytest.fixture(scope="function")
def stats_repo(fake_db):
    return SupabaseStatisticsRepository(fake_db)


@pytest.fixture(scope="function")
def owner_id():
    from uuid import UUID
    return UUID(OWNER_ID)


@pytest.fixture(scope="function")
def seeded_club(fake_db):
    """One club with two matches, three participants, a member, a user link and a fan profile"""
    club_id = "0b7e6c1a-2f3d-4e5a-8b9c-0d1e2f3a4b5c"
    fake_db.tables["clubs"] = [{
        "id": club_id,
        "name": "Padel Club Lyon",
        "location": "Lyon, France",
        "member_count": 12,
        "created_at": "2026-03-10T09:00:00+00:00",
        "updated_at": "2026-03-10T09:00:00+00:00",
    }]
    fake_db.tables["matches"] = [
        {"id": "m1", "club_id": club_id, "status": "open", "current_participants": 2,
         "created_at": "2026-09-01T10:00:00+00:00"},
        {"id": "m2", "club_id": club_id, "status": "full", "current_participants": 4,
         "created_at": "2026-10-02T10:00:00+00:00"},
        {"id": "m-other", "club_id": "another-club", "status": "open", "current_participants": 1,
         "created_at": "2026-10-03T10:00:00+00:00"},
    ]
    fake_db.tables["match_participants"] = [
        {"id": "p1", "match_id": "m1"},
        {"id": "p2", "match_id": "m2"},
        {"id": "p3", "match_id": "m2"},
        {"id": "p-other", "match_id": "m-other"},
    ]
    fake_db.tables["club_members"] = [{"id": "cm1", "club_id": club_id, "user_id": OWNER_ID, "role": "owner"}]
    fake_db.tables["user_clubs"] = [{"id": "uc1", "club_id": club_id, "user_id": OWNER_ID}]
    fake_db.tables["profiles"] = [{"id": OWNER_ID, "preferred_club_id": club_id}]
    return club_id
