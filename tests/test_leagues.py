"""Tests for fantasy_baseball.leagues — models, DAL queries, and default seed."""

import logging
from unittest.mock import MagicMock

import pydantic
import pytest

from fantasy_baseball.leagues.dal import LeaguesRepository
from fantasy_baseball.leagues.models import LeagueFilters, LeagueInput, RosterSlots, league_to_row
from fantasy_baseball.leagues.seed import DEFAULT_LEAGUES, seed_default_leagues


def _league(**overrides):
    data = {
        "externalId": "my-league",
        "name": "My League",
        "format": "roto",
        "draftType": "snake",
        "battingCategories": ["R", "HR"],
        "pitchingCategories": ["W", "K"],
    }
    data.update(overrides)
    return LeagueInput(**data)


class TestModels:
    def test_roster_slot_defaults(self):
        assert RosterSlots().as_dict() == {
            "C": 1, "1B": 1, "2B": 1, "3B": 1, "SS": 1, "OF": 3,
            "DH": 0, "SP": 5, "RP": 2, "UTIL": 0, "BENCH": 0,
        }

    def test_roster_slot_aliases(self):
        slots = RosterSlots.model_validate({"1B": 2, "2B": 0})
        assert slots.as_dict()["1B"] == 2
        assert slots.as_dict()["2B"] == 0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"format": "points"},
            {"draftType": "keeper"},
            {"battingCategories": []},
            {"pitchingCategories": ["XYZ"]},
            {"totalBudget": 0},
            {"rosterSlots": {"C": -1}},
        ],
    )
    def test_rejects_invalid(self, overrides):
        with pytest.raises(pydantic.ValidationError):
            _league(**overrides)

    def test_league_to_row(self):
        row = league_to_row(_league(categoryWeights={"HR": 1.5}))
        assert row["draft_type"] == "snake"
        assert row["roster_slots"]["OF"] == 3
        assert row["category_weights"] == {"HR": 1.5}
        assert row["is_default"] is False


class TestDal:
    def test_list_sorted_default_first(self, mock_db):
        cur = mock_db["cursor"]
        cur.fetchone.return_value = {"total": 0}

        LeaguesRepository(mock_db["db"]).list_leagues(
            LeagueFilters(format="roto", isDefault=False, search="obp")
        )

        select_sql, params = cur.execute.call_args_list[1][0]
        assert "ORDER BY is_default DESC, name ASC" in select_sql
        assert "coalesce(description, '')" in select_sql
        assert params == ["roto", False, "obp", 50, 0]

    def test_get_league_non_uuid(self, mock_db):
        assert LeaguesRepository(mock_db["db"]).get_league("x") is None


# ─── Seed ────────────────────────────────────────────────────────────────


class TestSeed:
    def test_six_unique_defaults(self):
        ids = [lg.externalId for lg in DEFAULT_LEAGUES]
        assert len(ids) == 6 == len(set(ids))
        assert set(ids) == {
            "standard-5x5-roto-auction",
            "standard-5x5-roto-snake",
            "obp-league-auction",
            "6x6-roto-qs-auction",
            "deep-league-auction",
            "h2h-categories-snake",
        }
        assert all(lg.isDefault for lg in DEFAULT_LEAGUES)

    def test_names_and_formats(self):
        by_id = {lg.externalId: lg for lg in DEFAULT_LEAGUES}
        assert by_id["standard-5x5-roto-auction"].name == "Standard 5x5 Roto (Auction)"
        assert by_id["standard-5x5-roto-snake"].draftType == "snake"
        assert by_id["obp-league-auction"].name == "OBP League (Auction)"
        assert "OBP" in by_id["obp-league-auction"].battingCategories
        assert by_id["6x6-roto-qs-auction"].name == "6x6 Roto with QS (Auction)"
        assert "QS" in by_id["6x6-roto-qs-auction"].pitchingCategories
        assert by_id["deep-league-auction"].name == "Deep League (Auction)"
        assert by_id["h2h-categories-snake"].format == "h2h-category"

    def test_seed_upserts_all(self, caplog):
        repo = MagicMock()
        repo.upsert_leagues.return_value = 6

        with caplog.at_level(logging.INFO, logger="fantasy_baseball.leagues.seed"):
            assert seed_default_leagues(repo) == 6

        repo.upsert_leagues.assert_called_once_with(DEFAULT_LEAGUES)
        assert "Seeding default leagues..." in caplog.messages
        assert "Seeded 6 default leagues" in caplog.messages

    def test_seed_is_idempotent_on_rerun(self):
        repo = MagicMock()
        repo.upsert_leagues.side_effect = [6, 0]
        assert seed_default_leagues(repo) == 6
        assert seed_default_leagues(repo) == 6

    def test_seed_failure_does_not_raise(self, caplog):
        repo = MagicMock()
        repo.upsert_leagues.side_effect = RuntimeError("Database error")

        with caplog.at_level(logging.ERROR, logger="fantasy_baseball.leagues.seed"):
            assert seed_default_leagues(repo) == 0

        assert "Failed to seed default leagues" in caplog.messages
