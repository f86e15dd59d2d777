"""MLB player records: models, storage, and sample data."""

from fantasy_baseball.players.dal import PlayersRepository
from fantasy_baseball.players.models import HitterInput, PitcherInput, PlayerFilters, PlayerInput

__all__ = ["HitterInput", "PitcherInput", "PlayerFilters", "PlayerInput", "PlayersRepository"]
