"""Fixed sample roster for local development: two players at every position."""

from __future__ import annotations

from fantasy_baseball.players.models import HitterInput, PitcherInput

# (externalId, name, team, position, league, batSide, season stats)
_HITTERS = [
    ("sample-c-1", "Adley Rutschman", "BAL", "C", "AL", "S", (0.277, 20, 80, 92, 1)),
    ("sample-c-2", "Will Smith", "LAD", "C", "NL", "R", (0.261, 19, 76, 63, 3)),
    ("sample-1b-1", "Freddie Freeman", "LAD", "1B", "NL", "L", (0.331, 29, 102, 72, 23)),
    ("sample-1b-2", "Vladimir Guerrero Jr.", "TOR", "1B", "AL", "R", (0.264, 26, 94, 67, 5)),
    ("sample-2b-1", "Marcus Semien", "TEX", "2B", "AL", "R", (0.276, 29, 100, 72, 14)),
    ("sample-2b-2", "Ozzie Albies", "ATL", "2B", "NL", "S", (0.280, 33, 109, 48, 13)),
    ("sample-3b-1", "Austin Riley", "ATL", "3B", "NL", "R", (0.281, 37, 97, 59, 3)),
    ("sample-3b-2", "Rafael Devers", "BOS", "3B", "AL", "L", (0.271, 33, 100, 62, 5)),
    ("sample-ss-1", "Corey Seager", "TEX", "SS", "AL", "L", (0.327, 33, 96, 49, 2)),
    ("sample-ss-2", "Francisco Lindor", "NYM", "SS", "NL", "S", (0.254, 31, 98, 66, 31)),
    ("sample-of-1", "Aaron Judge", "NYY", "OF", "AL", "R", (0.267, 37, 75, 88, 3)),
    ("sample-of-2", "Ronald Acuna Jr.", "ATL", "OF", "NL", "R", (0.337, 41, 106, 80, 73)),
    ("sample-dh-1", "Yordan Alvarez", "HOU", "DH", "AL", "L", (0.293, 31, 97, 69, 0)),
    ("sample-dh-2", "Kyle Schwarber", "PHI", "DH", "NL", "L", (0.197, 47, 104, 126, 0)),
]

# (externalId, name, team, position, league, pitchHand, season stats)
_PITCHERS = [
    ("sample-sp-1", "Gerrit Cole", "NYY", "SP", "AL", "R", (2.63, 15, 4, 0, 222, 209.0)),
    ("sample-sp-2", "Zac Gallen", "ARI", "SP", "NL", "R", (3.47, 17, 9, 0, 220, 210.0)),
    ("sample-rp-1", "Emmanuel Clase", "CLE", "RP", "AL", "R", (3.22, 3, 9, 44, 64, 72.2)),
    ("sample-rp-2", "Devin Williams", "MIL", "RP", "NL", "R", (1.53, 8, 3, 36, 87, 58.2)),
]

SAMPLE_SEASON = "2023"


def create_sample_players() -> list[HitterInput | PitcherInput]:
    """Return 14 hitters and 4 pitchers with one season of stats each."""
    players: list[HitterInput | PitcherInput] = []

    for order, (ext_id, name, team, pos, league, bats, line) in enumerate(_HITTERS):
        ba, hr, rbi, walk, sb = line
        players.append(
            HitterInput(
                externalId=ext_id,
                name=name,
                team=team,
                positions=[pos],
                league=league,
                batSide=bats,
                depthChartStatus="starter",
                depthChartOrder=order % 2 + 1,
                stats=[
                    {
                        "season": SAMPLE_SEASON,
                        "type": "hitter",
                        "data": {"ba": ba, "hr": hr, "rbi": rbi, "walk": walk, "sb": sb},
                    }
                ],
            )
        )

    for order, (ext_id, name, team, pos, league, throws, line) in enumerate(_PITCHERS):
        era, wins, losses, saves, strikeouts, innings = line
        players.append(
            PitcherInput(
                externalId=ext_id,
                name=name,
                team=team,
                positions=[pos],
                league=league,
                pitchHand=throws,
                depthChartStatus="starter",
                depthChartOrder=order % 2 + 1,
                stats=[
                    {
                        "season": SAMPLE_SEASON,
                        "type": "pitcher",
                        "data": {
                            "era": era,
                            "wins": wins,
                            "losses": losses,
                            "saves": saves,
                            "strikeouts": strikeouts,
                            "innings": innings,
                        },
                    }
                ],
            )
        )

    return players
