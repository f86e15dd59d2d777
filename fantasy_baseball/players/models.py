"""Player input models, query filters, and row converters."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator

Position = Literal["C", "1B", "2B", "3B", "SS", "OF", "DH", "SP", "RP"]
LeagueName = Literal["AL", "NL"]
PlayerType = Literal["hitter", "pitcher"]
DepthChartStatus = Literal["starter", "backup", "reserve", "minors"]
InjuryStatus = Literal["active", "day-to-day", "il-10", "il-15", "il-60", "out"]

# Maps camelCase input fields to table columns.
COLUMN_MAP: dict[str, str] = {
    "externalId": "external_id",
    "name": "name",
    "team": "team",
    "positions": "positions",
    "league": "league",
    "playerType": "player_type",
    "stats": "stats",
    "jerseyNumber": "jersey_number",
    "depthChartStatus": "depth_chart_status",
    "depthChartOrder": "depth_chart_order",
    "injuryStatus": "injury_status",
    "injuryNote": "injury_note",
    "birthDate": "birth_date",
    "age": "age",
    "height": "height",
    "weight": "weight",
    "mlbDebutDate": "mlb_debut_date",
    "active": "active",
    "batSide": "bat_side",
    "pitchHand": "pitch_hand",
}


# ─── Stats ───────────────────────────────────────────────────────────────


class HitterStats(BaseModel):
    ba: float | None = Field(default=None, ge=0, le=1)
    hr: int | None = Field(default=None, ge=0)
    rbi: int | None = Field(default=None, ge=0)
    walk: int | None = Field(default=None, ge=0)
    sb: int | None = Field(default=None, ge=0)


class PitcherStats(BaseModel):
    era: float | None = Field(default=None, ge=0)
    wins: int | None = Field(default=None, ge=0)
    losses: int | None = Field(default=None, ge=0)
    saves: int | None = Field(default=None, ge=0)
    strikeouts: int | None = Field(default=None, ge=0)
    innings: float | None = Field(default=None, ge=0)


class HitterStatLine(BaseModel):
    season: str
    type: Literal["hitter"]
    data: HitterStats


class PitcherStatLine(BaseModel):
    season: str
    type: Literal["pitcher"]
    data: PitcherStats


PlayerStat = Annotated[HitterStatLine | PitcherStatLine, Field(discriminator="type")]


# ─── Players ─────────────────────────────────────────────────────────────


class _PlayerBase(BaseModel):
    externalId: str = Field(min_length=1)
    name: str = Field(min_length=1)
    team: str = Field(min_length=2, max_length=3)
    positions: list[Position] = Field(min_length=1)
    league: LeagueName
    stats: list[PlayerStat] = Field(default_factory=list)
    jerseyNumber: str | None = None
    depthChartStatus: DepthChartStatus | None = None
    depthChartOrder: int | None = Field(default=None, ge=1)
    injuryStatus: InjuryStatus = "active"
    injuryNote: str | None = None
    birthDate: str | None = None
    age: int | None = None
    height: str | None = None
    weight: int | None = None
    mlbDebutDate: str | None = None
    active: bool = True

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("team", mode="before")
    @classmethod
    def upper_team(cls, v: object) -> object:
        return v.strip().upper() if isinstance(v, str) else v


class HitterInput(_PlayerBase):
    playerType: Literal["hitter"] = "hitter"
    batSide: Literal["R", "L", "S"] | None = None


class PitcherInput(_PlayerBase):
    playerType: Literal["pitcher"] = "pitcher"
    pitchHand: Literal["R", "L"] | None = None


PlayerInput = Annotated[HitterInput | PitcherInput, Field(discriminator="playerType")]


class PlayerFilters(BaseModel):
    league: Literal["AL", "NL", "MLB"] | None = None
    position: Position | None = None
    playerType: PlayerType | None = None
    search: str | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=50, ge=1, le=100)


# ─── Row conversion ──────────────────────────────────────────────────────


def player_to_row(player: HitterInput | PitcherInput) -> dict:
    """Flatten an input model to column -> value (stats as plain JSON data)."""
    data = player.model_dump(mode="json")
    row = {column: data.get(field) for field, column in COLUMN_MAP.items()}
    row["stats"] = [s.model_dump(mode="json", exclude_none=True) for s in player.stats]
    return row


def player_to_dict(row: dict) -> dict:
    """Convert a players row to the API's camelCase shape."""
    result = {
        "id": str(row["id"]),
        "externalId": row["external_id"],
        "name": row["name"],
        "team": row["team"],
        "positions": list(row.get("positions") or []),
        "league": row["league"],
        "playerType": row["player_type"],
        "stats": row.get("stats") or [],
        "jerseyNumber": row.get("jersey_number"),
        "depthChartStatus": row.get("depth_chart_status"),
        "depthChartOrder": row.get("depth_chart_order"),
        "injuryStatus": row.get("injury_status") or "active",
        "injuryNote": row.get("injury_note"),
        "birthDate": row.get("birth_date"),
        "age": row.get("age"),
        "height": row.get("height"),
        "weight": row.get("weight"),
        "mlbDebutDate": row.get("mlb_debut_date"),
        "active": row.get("active", True),
        "createdAt": row["created_at"].isoformat() if row.get("created_at") else None,
        "updatedAt": row["updated_at"].isoformat() if row.get("updated_at") else None,
    }
    if row["player_type"] == "hitter":
        result["batSide"] = row.get("bat_side")
    else:
        result["pitchHand"] = row.get("pitch_hand")
    return result
