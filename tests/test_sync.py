"""Tests for fantasy_baseball.jobs — MLB client, roster mapping, sync, scheduler."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from fantasy_baseball.config import Config, SyncConfig
from fantasy_baseball.jobs.mlb_client import MlbStatsClient
from fantasy_baseball.jobs.scheduler import JOB_ID, PlayerSyncScheduler
from fantasy_baseball.jobs.sync import build_team_index, map_mlb_player, sync_players
from fantasy_baseball.players.models import HitterInput, PitcherInput

TEAMS = [
    {"id": 147, "abbreviation": "NYY", "league": {"id": 103}},
    {"id": 121, "abbreviation": "NYM", "league": {"id": 104}},
    {"id": 999, "abbreviation": "XXX", "league": {"id": 160}},
]


def _person(pid=592450, pos="RF", team=147, **extra):
    person = {
        "id": pid,
        "fullName": "Aaron Judge",
        "primaryNumber": "99",
        "currentAge": 32,
        "active": True,
        "currentTeam": {"id": team},
        "primaryPosition": {"abbreviation": pos},
        "batSide": {"code": "R"},
        "pitchHand": {"code": "R"},
    }
    person.update(extra)
    return person


# ─── Mapping ─────────────────────────────────────────────────────────────


class TestMapping:
    def test_team_index_keeps_al_nl_only(self):
        assert build_team_index(TEAMS) == {147: ("NYY", "AL"), 121: ("NYM", "NL")}

    @pytest.mark.parametrize(("code", "expected"), [("LF", "OF"), ("CF", "OF"), ("RF", "OF"), ("C", "C")])
    def test_outfield_and_infield(self, code, expected):
        p = map_mlb_player(_person(pos=code), build_team_index(TEAMS))
        assert isinstance(p, HitterInput)
        assert p.positions == [expected]
        assert p.batSide == "R"

    def test_hitter_fields(self):
        p = map_mlb_player(_person(), build_team_index(TEAMS))
        assert p.externalId == "mlb-592450"
        assert (p.team, p.league) == ("NYY", "AL")
        assert p.jerseyNumber == "99"
        assert p.age == 32

    def test_pitcher(self):
        p = map_mlb_player(_person(pos="P", team=121), build_team_index(TEAMS))
        assert isinstance(p, PitcherInput)
        assert p.positions == ["SP"]
        assert p.league == "NL"
        assert p.pitchHand == "R"

    def test_two_way_player(self):
        p = map_mlb_player(_person(pos="TWP"), build_team_index(TEAMS))
        assert isinstance(p, PitcherInput)
        assert p.positions == ["DH", "SP"]

    @pytest.mark.parametrize(
        "person",
        [
            _person(pos="PH"),
            _person(team=999),
            _person(currentTeam=None),
            _person(fullName=""),
        ],
    )
    def test_unmappable_skipped(self, person):
        assert map_mlb_player(person, build_team_index(TEAMS)) is None


# ─── Client ──────────────────────────────────────────────────────────────


def _mlb_transport(calls):
    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url)
        if request.url.path == "/api/v1/teams":
            return httpx.Response(200, json={"teams": TEAMS})
        if request.url.path == "/api/v1/sports/1/players":
            return httpx.Response(200, json={"people": [_person(), _person(pid=1, pos="PH")]})
        return httpx.Response(404)

    return httpx.MockTransport(handler)


class TestClient:
    @pytest.mark.asyncio
    async def test_fetches_teams_and_players(self):
        calls = []
        http = httpx.AsyncClient(transport=_mlb_transport(calls))
        client = MlbStatsClient("http://mlb.test", http=http)

        teams = await client.get_teams(2024)
        people = await client.get_players(2024)
        await http.aclose()

        assert len(teams) == 3
        assert len(people) == 2
        assert calls[0].params["sportId"] == "1"
        assert calls[0].params["season"] == "2024"

    @pytest.mark.asyncio
    async def test_http_error_raises(self):
        http = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(500)))
        client = MlbStatsClient("http://mlb.test", http=http)
        with pytest.raises(httpx.HTTPStatusError):
            await client.get_teams(2024)
        await http.aclose()


# ─── Sync ────────────────────────────────────────────────────────────────


@pytest.fixture
def sync_ctx():
    ctx = MagicMock()
    ctx.config = Config(environment="test", sync=SyncConfig(season=2024))
    ctx.players.upsert_players.return_value = 1
    return ctx


class TestSyncPlayers:
    @pytest.mark.asyncio
    async def test_upserts_mapped_players(self, sync_ctx):
        http = httpx.AsyncClient(transport=_mlb_transport([]))
        client = MlbStatsClient("http://mlb.test", http=http)

        count = await sync_players(sync_ctx, client=client)
        await http.aclose()

        assert count == 1
        (players,) = sync_ctx.players.upsert_players.call_args[0]
        assert [p.externalId for p in players] == ["mlb-592450"]

    @pytest.mark.asyncio
    async def test_fetch_failure_propagates(self, sync_ctx):
        client = MagicMock()
        client.get_teams = AsyncMock(side_effect=httpx.ConnectError("down"))
        with pytest.raises(httpx.ConnectError):
            await sync_players(sync_ctx, client=client)
        sync_ctx.players.upsert_players.assert_not_called()


# ─── Scheduler ───────────────────────────────────────────────────────────


class TestScheduler:
    @pytest.mark.asyncio
    async def test_job_wrapper_never_raises(self, sync_ctx, monkeypatch):
        monkeypatch.setattr(
            "fantasy_baseball.jobs.scheduler.sync_players",
            AsyncMock(side_effect=RuntimeError("MLB API down")),
        )
        assert await PlayerSyncScheduler(sync_ctx).run_job() is None

    @pytest.mark.asyncio
    async def test_job_wrapper_returns_count(self, sync_ctx, monkeypatch):
        monkeypatch.setattr("fantasy_baseball.jobs.scheduler.sync_players", AsyncMock(return_value=5))
        assert await PlayerSyncScheduler(sync_ctx).run_job() == 5

    @pytest.mark.asyncio
    async def test_start_registers_cron_job(self, sync_ctx):
        sched = PlayerSyncScheduler(sync_ctx)
        sched.start()
        try:
            job = sched.scheduler.get_job(JOB_ID)
            assert job is not None
            assert job.max_instances == 1
            assert job.coalesce is True
            assert sched.running
        finally:
            sched.shutdown()
        await asyncio.sleep(0)

    @pytest.mark.asyncio
    async def test_disabled_schedule_has_no_job(self, sync_ctx):
        sync_ctx.config = Config(environment="test", sync=SyncConfig(enabled=False))
        sched = PlayerSyncScheduler(sync_ctx)
        sched.start()
        try:
            assert sched.scheduler.get_job(JOB_ID) is None
        finally:
            sched.shutdown()

    def test_trigger_now_queues_job(self, sync_ctx):
        sched = PlayerSyncScheduler(sync_ctx)
        sched.trigger_now()
        assert sched.scheduler.get_job(JOB_ID) is not None
