"""Fantasy league formats: models, storage, and default seed."""

from fantasy_baseball.leagues.dal import LeaguesRepository
from fantasy_baseball.leagues.models import LeagueFilters, LeagueInput, RosterSlots

__all__ = ["LeagueFilters", "LeagueInput", "LeaguesRepository", "RosterSlots"]
