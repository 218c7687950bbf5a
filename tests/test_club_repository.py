"""
Club repository tests - CRUD and cascade delete against the in-memory Supabase
"""

import logging
import pytest
from uuid import UUID

from core.domain.constants import LOCATION_PLACEHOLDER
from core.domain.errors import AuthError, FetchError, WriteError, NotFoundError, ClubDeletionError
from core.domain.models import ClubCreate, ClubUpdate
from infrastructure.database.club_repository import SupabaseClubRepository
from tests.fakes import cascade_rpc, api_error


class TestListClubs:
    """list_all"""

    @pytest.mark.asyncio
    async def test_empty_table_returns_empty_list(self, club_repo):
        assert await club_repo.list_all() == []

    @pytest.mark.asyncio
    async def test_newest_first(self, club_repo, fake_db):
        fake_db.tables["clubs"] = [
            {"id": "11111111-1111-1111-1111-111111111111", "name": "Old", "location": "Nantes, France",
             "created_at": "2025-01-01T00:00:00+00:00"},
            {"id": "22222222-2222-2222-2222-222222222222", "name": "New", "location": "Paris, France",
             "created_at": "2026-01-01T00:00:00+00:00"},
        ]
        clubs = await club_repo.list_all()
        assert [c.name for c in clubs] == ["New", "Old"]
        assert clubs[0].member_count == 0

    @pytest.mark.asyncio
    async def test_backend_error_raises_fetch_error(self, club_repo, fake_db):
        fake_db.fail("clubs", "select", "permission denied")
        with pytest.raises(FetchError) as exc:
            await club_repo.list_all()
        assert "permission denied" in exc.value.message


class TestCreateClub:
    """create"""

    @pytest.mark.asyncio
    async def test_create_registers_owner(self, club_repo, fake_db, owner_id):
        club = await club_repo.create(
            ClubCreate(name="Padel Club Paris", location="Paris, France"), owner_id
        )

        assert isinstance(club.id, UUID)
        assert club.name == "Padel Club Paris"
        assert club.location == "Paris, France"
        memberships = fake_db.rows("club_members")
        assert len(memberships) == 1
        assert {k: memberships[0][k] for k in ("club_id", "user_id", "role", "status")} == {
            "club_id": str(club.id),
            "user_id": str(owner_id),
            "role": "owner",
            "status": "active",
        }

    @pytest.mark.asyncio
    async def test_each_club_gets_a_new_id(self, club_repo, owner_id):
        first = await club_repo.create(ClubCreate(name="A", location="Lille, France"), owner_id)
        second = await club_repo.create(ClubCreate(name="B", location="Lille, France"), owner_id)
        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_requires_authenticated_owner(self, club_repo, fake_db):
        with pytest.raises(AuthError):
            await club_repo.create(ClubCreate(name="Padel Club Paris", location="Paris, France"), None)
        assert fake_db.rows("clubs") == []

    @pytest.mark.asyncio
    async def test_empty_location_is_replaced(self, club_repo, fake_db, owner_id):
        club = await club_repo.create(ClubCreate(name="Sans lieu"), owner_id)
        assert club.location == LOCATION_PLACEHOLDER
        assert fake_db.rows("clubs")[0]["location"] == LOCATION_PLACEHOLDER

    @pytest.mark.asyncio
    async def test_membership_failure_is_logged_not_raised(self, club_repo, fake_db, owner_id, caplog):
        fake_db.fail("club_members", "insert", "rls violation")

        with caplog.at_level(logging.ERROR):
            club = await club_repo.create(ClubCreate(name="Padel Club Paris", location="Paris, France"), owner_id)

        assert club.name == "Padel Club Paris"
        assert len(fake_db.rows("clubs")) == 1
        assert fake_db.rows("club_members") == []
        assert "rls violation" in caplog.text

    @pytest.mark.asyncio
    async def test_insert_failure_raises_write_error(self, club_repo, fake_db, owner_id):
        fake_db.fail("clubs", "insert", "duplicate key")
        with pytest.raises(WriteError):
            await club_repo.create(ClubCreate(name="Padel Club Paris", location="Paris, France"), owner_id)

    def test_blank_name_rejected(self):
        with pytest.raises(ValueError):
            ClubCreate(name="   ", location="Paris, France")

    def test_coordinates_must_be_paired(self):
        with pytest.raises(ValueError):
            ClubCreate(name="Padel Club Paris", latitude=48.85)


class TestUpdateClub:
    """update"""

    @pytest.mark.asyncio
    async def test_only_supplied_fields_change(self, club_repo, fake_db, seeded_club):
        club = await club_repo.update(UUID(seeded_club), ClubUpdate(name="Padel Club Lyon Sud"))

        assert club.name == "Padel Club Lyon Sud"
        assert club.location == "Lyon, France"
        assert fake_db.calls[-1] == ("clubs", "update")

    @pytest.mark.asyncio
    async def test_empty_location_never_persisted(self, club_repo, fake_db, seeded_club):
        club = await club_repo.update(UUID(seeded_club), ClubUpdate(location=""))

        assert club.location == "Non spécifié"
        assert fake_db.rows("clubs")[0]["location"] == "Non spécifié"

    @pytest.mark.asyncio
    async def test_null_location_never_persisted(self, club_repo, fake_db, seeded_club):
        await club_repo.update(UUID(seeded_club), ClubUpdate.model_validate({"location": None}))
        assert fake_db.rows("clubs")[0]["location"] == LOCATION_PLACEHOLDER

    @pytest.mark.asyncio
    async def test_coordinates_updated_together(self, club_repo, fake_db, seeded_club):
        club = await club_repo.update(UUID(seeded_club), ClubUpdate(latitude=45.76, longitude=4.83))
        assert (club.latitude, club.longitude) == (45.76, 4.83)

    def test_lone_coordinate_rejected(self):
        with pytest.raises(ValueError):
            ClubUpdate(latitude=45.76)

    @pytest.mark.asyncio
    async def test_unknown_id_raises_not_found(self, club_repo):
        with pytest.raises(NotFoundError):
            await club_repo.update(UUID("99999999-9999-9999-9999-999999999999"), ClubUpdate(name="Ghost"))

    @pytest.mark.asyncio
    async def test_backend_error_is_not_not_found(self, club_repo, fake_db, seeded_club):
        fake_db.fail("clubs", "update", "timeout")
        with pytest.raises(WriteError):
            await club_repo.update(UUID(seeded_club), ClubUpdate(name="X"))

    @pytest.mark.asyncio
    async def test_empty_update_reads_current_row(self, club_repo, fake_db, seeded_club):
        club = await club_repo.update(UUID(seeded_club), ClubUpdate())
        assert club.name == "Padel Club Lyon"
        assert ("clubs", "update") not in fake_db.calls


class TestDeleteClub:
    """delete - atomic RPC and stepwise fallback"""

    def _assert_cascaded(self, fake_db, club_id):
        assert all(c["id"] != club_id for c in fake_db.rows("clubs"))
        assert [m["id"] for m in fake_db.rows("matches")] == ["m-other"]
        assert [p["id"] for p in fake_db.rows("match_participants")] == ["p-other"]
        assert fake_db.rows("club_members") == []
        assert fake_db.rows("user_clubs") == []

    @pytest.mark.asyncio
    async def test_requires_authentication(self, club_repo, fake_db, seeded_club):
        with pytest.raises(AuthError):
            await club_repo.delete(UUID(seeded_club), None)
        assert len(fake_db.rows("clubs")) == 1

    @pytest.mark.asyncio
    async def test_atomic_path(self, club_repo, fake_db, seeded_club, owner_id):
        fake_db.rpcs["delete_club_cascade"] = cascade_rpc

        await club_repo.delete(UUID(seeded_club), owner_id)

        self._assert_cascaded(fake_db, seeded_club)
        assert ("clubs", "delete") not in fake_db.calls

    @pytest.mark.asyncio
    async def test_stepwise_fallback_when_rpc_missing(self, club_repo, fake_db, seeded_club, owner_id):
        await club_repo.delete(UUID(seeded_club), owner_id)

        self._assert_cascaded(fake_db, seeded_club)
        # profiles fallback: RPC missing, direct update applied
        assert fake_db.rows("profiles")[0]["preferred_club_id"] is None
        assert [c for c in fake_db.calls if c[1] == "delete"] == [
            ("user_clubs", "delete"),
            ("match_participants", "delete"),
            ("matches", "delete"),
            ("club_members", "delete"),
            ("clubs", "delete"),
        ]

    @pytest.mark.asyncio
    async def test_stepwise_uses_profile_rpc_when_available(self, club_repo, fake_db, seeded_club, owner_id):
        received = []

        def nullify(db, params):
            received.append(params)
            for profile in db.rows("profiles"):
                if profile.get("preferred_club_id") == params["target_club_id"]:
                    profile["preferred_club_id"] = None

        fake_db.rpcs["nullify_preferred_club"] = nullify

        await club_repo.delete(UUID(seeded_club), owner_id)

        self._assert_cascaded(fake_db, seeded_club)
        assert received == [{"target_club_id": seeded_club}]
        assert fake_db.rows("profiles")[0]["preferred_club_id"] is None
        assert ("profiles", "update") not in fake_db.calls

    @pytest.mark.asyncio
    async def test_deleted_club_not_listed(self, club_repo, seeded_club, owner_id):
        await club_repo.delete(UUID(seeded_club), owner_id)
        assert all(str(c.id) != seeded_club for c in await club_repo.list_all())

    @pytest.mark.asyncio
    async def test_missing_rpc_is_remembered(self, club_repo, fake_db, seeded_club, owner_id):
        await club_repo.delete(UUID(seeded_club), owner_id)
        assert club_repo.atomic_available is False

        fake_db.calls.clear()
        await club_repo.delete(UUID(seeded_club), owner_id)
        assert ("rpc", "delete_club_cascade") not in fake_db.calls

    @pytest.mark.asyncio
    async def test_failing_rpc_falls_back_but_is_retried_next_time(self, club_repo, fake_db, seeded_club, owner_id):
        def broken(db, params):
            raise api_error("deadlock detected", code="40P01")

        fake_db.rpcs["delete_club_cascade"] = broken
        await club_repo.delete(UUID(seeded_club), owner_id)

        self._assert_cascaded(fake_db, seeded_club)
        assert club_repo.atomic_available is True

    @pytest.mark.asyncio
    async def test_profile_cleanup_is_best_effort(self, club_repo, fake_db, seeded_club, owner_id, caplog):
        fake_db.fail("profiles", "update", "rls violation")

        with caplog.at_level(logging.WARNING):
            await club_repo.delete(UUID(seeded_club), owner_id)

        self._assert_cascaded(fake_db, seeded_club)
        assert "continuing with deletion" in caplog.text

    @pytest.mark.asyncio
    async def test_stage_failure_reports_stage(self, club_repo, fake_db, seeded_club, owner_id):
        fake_db.fail("matches", "delete", "fk violation")

        with pytest.raises(ClubDeletionError) as exc:
            await club_repo.delete(UUID(seeded_club), owner_id)

        assert exc.value.stage == "matches"
        assert "fk violation" in exc.value.message
        # earlier stages were applied, later ones were not
        assert fake_db.rows("user_clubs") == []
        assert [p["id"] for p in fake_db.rows("match_participants")] == ["p-other"]
        assert len(fake_db.rows("club_members")) == 1
        assert len(fake_db.rows("clubs")) == 1

    @pytest.mark.asyncio
    async def test_rerun_after_partial_failure_completes(self, club_repo, fake_db, seeded_club, owner_id):
        fake_db.fail("club_members", "delete", "timeout")
        with pytest.raises(ClubDeletionError):
            await club_repo.delete(UUID(seeded_club), owner_id)

        del fake_db.failures[("club_members", "delete")]
        await club_repo.delete(UUID(seeded_club), owner_id)

        self._assert_cascaded(fake_db, seeded_club)

    @pytest.mark.asyncio
    async def test_no_matches_skips_participant_delete(self, fake_db, owner_id):
        fake_db.tables["clubs"] = [{"id": "c-empty", "name": "Empty", "location": "Nice, France"}]
        repo = SupabaseClubRepository(fake_db)

        await repo.delete("c-empty", owner_id)

        assert ("match_participants", "delete") not in fake_db.calls
        assert fake_db.rows("clubs") == []

    @pytest.mark.asyncio
    async def test_both_paths_leave_same_state(self, fake_db, seeded_club, owner_id):
        from copy import deepcopy
        from tests.fakes import FakeSupabase

        atomic_db = FakeSupabase()
        atomic_db.tables = deepcopy(fake_db.tables)
        atomic_db.rpcs["delete_club_cascade"] = cascade_rpc

        await SupabaseClubRepository(atomic_db).delete(UUID(seeded_club), owner_id)
        await SupabaseClubRepository(fake_db).delete(UUID(seeded_club), owner_id)

        for table in ("clubs", "matches", "match_participants", "club_members", "user_clubs"):
            assert atomic_db.rows(table) == fake_db.rows(table)
