"""League format models, query filters, and row converters."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LeagueFormat = Literal["roto", "h2h-points", "h2h-category"]
DraftType = Literal["auction", "snake"]
BattingCategory = Literal["R", "HR", "RBI", "SB", "AVG", "OBP", "SLG", "OPS", "H", "2B", "3B", "BB", "K"]
PitchingCategory = Literal[
    "W", "SV", "K", "ERA", "WHIP", "QS", "IP", "H", "BB", "HR", "L", "HLD", "SV+HLD"
]


class RosterSlots(BaseModel):
    """Starting slots per position. Keys like ``1B`` are aliases."""

    model_config = ConfigDict(populate_by_name=True)

    C: int = Field(default=1, ge=0)
    first_base: int = Field(default=1, ge=0, alias="1B")
    second_base: int = Field(default=1, ge=0, alias="2B")
    third_base: int = Field(default=1, ge=0, alias="3B")
    SS: int = Field(default=1, ge=0)
    OF: int = Field(default=3, ge=0)
    DH: int = Field(default=0, ge=0)
    SP: int = Field(default=5, ge=0)
    RP: int = Field(default=2, ge=0)
    UTIL: int = Field(default=0, ge=0)
    BENCH: int = Field(default=0, ge=0)

    def as_dict(self) -> dict[str, int]:
        return self.model_dump(by_alias=True)


class LeagueInput(BaseModel):
    externalId: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str | None = None
    format: LeagueFormat
    draftType: DraftType
    battingCategories: list[BattingCategory] = Field(min_length=1)
    pitchingCategories: list[PitchingCategory] = Field(min_length=1)
    rosterSlots: RosterSlots = Field(default_factory=RosterSlots)
    totalBudget: int | None = Field(default=None, ge=1)
    isDefault: bool = False
    categoryWeights: dict[str, float] | None = None

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v


class LeagueFilters(BaseModel):
    format: LeagueFormat | None = None
    draftType: DraftType | None = None
    isDefault: bool | None = None
    search: str | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=50, ge=1, le=100)


def league_to_row(league: LeagueInput) -> dict:
    return {
        "external_id": league.externalId,
        "name": league.name,
        "description": league.description,
        "format": league.format,
        "draft_type": league.draftType,
        "batting_categories": list(league.battingCategories),
        "pitching_categories": list(league.pitchingCategories),
        "roster_slots": league.rosterSlots.as_dict(),
        "total_budget": league.totalBudget,
        "is_default": league.isDefault,
        "category_weights": league.categoryWeights,
    }


def league_to_dict(row: dict) -> dict:
    """Convert a leagues row to the API's camelCase shape."""
    return {
        "id": str(row["id"]),
        "externalId": row["external_id"],
        "name": row["name"],
        "description": row.get("description"),
        "format": row["format"],
        "draftType": row["draft_type"],
        "battingCategories": list(row.get("batting_categories") or []),
        "pitchingCategories": list(row.get("pitching_categories") or []),
        "rosterSlots": row.get("roster_slots") or {},
        "totalBudget": row.get("total_budget"),
        "isDefault": row.get("is_default", False),
        "categoryWeights": row.get("category_weights"),
        "createdAt": row["created_at"].isoformat() if row.get("created_at") else None,
        "updatedAt": row["updated_at"].isoformat() if row.get("updated_at") else None,
    }
