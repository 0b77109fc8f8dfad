"""
Pydantic models for league data.

Two families of models live here:
- Export models (Player, Team, Standing, Game and the per-category stat
  entries) whose field names mirror the keys of the game export.
- Computed models (AggregatedStatLine, PlayoffTeam, BracketMatchup,
  PlayoffPicture) with snake_case attributes, serialized in camelCase for
  API consumers.
"""

from __future__ import annotations

import math
from typing import Annotated, Any, ClassVar, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .errors import InvalidStatEntryError
from .types import Conference, GameResult, PlayoffRound, StatCategory

Number = Union[int, float]


def clean_number(value: Any) -> Optional[Number]:
    """Return value if it is a usable number, else None (never NaN)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


# =============================================================================
# Export Models
# =============================================================================


class Player(BaseModel):
    """Roster entry from the export."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    rosterId: int
    firstName: str = ""
    lastName: str = ""
    position: str = ""
    overall: Optional[int] = None
    teamId: int = 0
    teamAbbr: Optional[str] = None
    age: Optional[int] = None
    yearsPro: int = 0
    devTrait: int = 0
    isFreeAgent: bool = False
    contractSalary: Optional[int] = None
    contractBonus: Optional[int] = None
    contractLength: Optional[int] = None
    contractYearsLeft: Optional[int] = None
    capHit: Optional[int] = None
    qBStyleTrait: Optional[int] = None
    sensePressureTrait: Optional[int] = None
    penaltyTrait: Optional[int] = None
    playBallTrait: Optional[int] = None
    coverBallTrait: Optional[int] = None
    lBStyleTrait: Optional[int] = None
    throwAwayTrait: Optional[int] = None
    tightSpiralTrait: Optional[int] = None
    clutchTrait: Optional[int] = None

    @property
    def full_name(self) -> str:
        return f"{self.firstName} {self.lastName}".strip()


class Team(BaseModel):
    """Team entry from the export."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    teamId: int
    teamName: Optional[str] = None
    teamAbbr: Optional[str] = None
    cityName: Optional[str] = None
    nickName: Optional[str] = None
    displayName: Optional[str] = None
    divName: Optional[str] = None
    confName: Optional[str] = None
    wins: int = 0
    losses: int = 0
    ties: int = 0
    ownerName: Optional[str] = None
    userName: Optional[str] = None

    @property
    def label(self) -> str:
        """Best available display name."""
        return self.displayName or self.teamName or self.nickName or str(self.teamId)


class Standing(BaseModel):
    """
    One team's season record and ranking.

    `rank` is computed upstream (win pct, tiebreakers); it is consumed here,
    never recomputed.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    teamId: int
    teamName: Optional[str] = None
    teamAbbr: Optional[str] = None
    wins: int = 0
    losses: int = 0
    ties: int = 0
    rank: Optional[int] = None
    conferenceName: Optional[str] = None
    # The export spells this key "divisonName"
    divisionName: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("divisionName", "divisonName"),
    )
    divisionRank: Optional[int] = None
    conferenceRank: Optional[int] = None
    ptsFor: Optional[int] = None
    ptsAgainst: Optional[int] = None
    netPts: Optional[int] = None
    winPct: Optional[float] = None
    seasonIndex: Optional[int] = None


class Game(BaseModel):
    """Schedule row from the export."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    scheduleId: int
    weekIndex: int
    seasonIndex: Optional[int] = None
    homeTeamId: int
    awayTeamId: int
    homeScore: int = 0
    awayScore: int = 0
    gameStatus: GameResult = GameResult.NOT_PLAYED
    stageIndex: Optional[int] = None

    @property
    def winner_team_id(self) -> Optional[int]:
        """Team id of the winner, None when unplayed or tied."""
        if self.gameStatus == GameResult.HOME_WIN:
            return self.homeTeamId
        if self.gameStatus == GameResult.AWAY_WIN:
            return self.awayTeamId
        return None


# =============================================================================
# Stat Entry Variants
# =============================================================================


class BaseStatEntry(BaseModel):
    """
    One player's numbers for one game of one category.

    Subclasses declare which counting fields they carry. Fields left as
    None were not collected for that game.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    # Summed across games
    COUNTING_FIELDS: ClassVar[tuple[str, ...]] = ()
    # Combined with max() across games
    MAX_FIELDS: ClassVar[tuple[str, ...]] = ()

    rosterId: int
    scheduleId: Optional[int] = None
    weekIndex: Optional[int] = None
    seasonIndex: Optional[int] = None

    @model_validator(mode="before")
    @classmethod
    def _drop_malformed_numbers(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        cleaned = dict(data)
        for name in cls.COUNTING_FIELDS + cls.MAX_FIELDS:
            if name in cleaned:
                cleaned[name] = clean_number(cleaned[name])
        return cleaned


class PassingStatEntry(BaseStatEntry):
    COUNTING_FIELDS: ClassVar[tuple[str, ...]] = (
        "passComp", "passAtt", "passYds", "passTDs", "passInts", "passSacks",
    )

    category: Literal["passing"] = "passing"
    passComp: Optional[Number] = None
    passAtt: Optional[Number] = None
    passYds: Optional[Number] = None
    passTDs: Optional[Number] = None
    passInts: Optional[Number] = None
    passSacks: Optional[Number] = None


class RushingStatEntry(BaseStatEntry):
    COUNTING_FIELDS: ClassVar[tuple[str, ...]] = ("rushAtt", "rushYds", "rushTDs", "rushFum")

    category: Literal["rushing"] = "rushing"
    rushAtt: Optional[Number] = None
    rushYds: Optional[Number] = None
    rushTDs: Optional[Number] = None
    rushFum: Optional[Number] = None


class ReceivingStatEntry(BaseStatEntry):
    COUNTING_FIELDS: ClassVar[tuple[str, ...]] = ("recCatches", "recYds", "recTDs", "recDrops")

    category: Literal["receiving"] = "receiving"
    recCatches: Optional[Number] = None
    recYds: Optional[Number] = None
    recTDs: Optional[Number] = None
    recDrops: Optional[Number] = None


class DefenseStatEntry(BaseStatEntry):
    COUNTING_FIELDS: ClassVar[tuple[str, ...]] = (
        "defTotalTackles", "defSacks", "defInts", "defFumRec",
        "defForcedFum", "defTDs", "defDeflections",
    )

    category: Literal["defense"] = "defense"
    defTotalTackles: Optional[Number] = None
    defSacks: Optional[Number] = None
    defInts: Optional[Number] = None
    defFumRec: Optional[Number] = None
    defForcedFum: Optional[Number] = None
    defTDs: Optional[Number] = None
    defDeflections: Optional[Number] = None


class KickingStatEntry(BaseStatEntry):
    COUNTING_FIELDS: ClassVar[tuple[str, ...]] = (
        "fGMade", "fGAtt", "fG50PlusMade", "fG50PlusAtt", "xPMade", "xPAtt", "kickPts",
    )
    MAX_FIELDS: ClassVar[tuple[str, ...]] = ("fGLongest",)

    category: Literal["kicking"] = "kicking"
    fGMade: Optional[Number] = None
    fGAtt: Optional[Number] = None
    fG50PlusMade: Optional[Number] = None
    fG50PlusAtt: Optional[Number] = None
    fGLongest: Optional[Number] = None
    xPMade: Optional[Number] = None
    xPAtt: Optional[Number] = None
    kickPts: Optional[Number] = None


class PuntingStatEntry(BaseStatEntry):
    COUNTING_FIELDS: ClassVar[tuple[str, ...]] = (
        "puntAtt", "puntYds", "puntNetYds", "puntsIn20", "puntTBs", "puntsBlocked",
    )

    category: Literal["punting"] = "punting"
    puntAtt: Optional[Number] = None
    puntYds: Optional[Number] = None
    puntNetYds: Optional[Number] = None
    puntsIn20: Optional[Number] = None
    puntTBs: Optional[Number] = None
    puntsBlocked: Optional[Number] = None


StatEntry = Annotated[
    Union[
        PassingStatEntry,
        RushingStatEntry,
        ReceivingStatEntry,
        DefenseStatEntry,
        KickingStatEntry,
        PuntingStatEntry,
    ],
    Field(discriminator="category"),
]

STAT_ENTRY_MODELS: dict[StatCategory, type[BaseStatEntry]] = {
    StatCategory.passing: PassingStatEntry,
    StatCategory.rushing: RushingStatEntry,
    StatCategory.receiving: ReceivingStatEntry,
    StatCategory.defense: DefenseStatEntry,
    StatCategory.kicking: KickingStatEntry,
    StatCategory.punting: PuntingStatEntry,
}


def parse_stat_entry(category: str | StatCategory, raw: dict[str, Any]) -> BaseStatEntry:
    """
    Build the category's stat entry variant from a raw export mapping.

    Per-game derived values in the export (passerRating, rushYdsPerAtt, ...)
    are not carried over; they are recomputed from season totals.

    Raises:
        InvalidStatEntryError: If rosterId is missing or the category is unknown
    """
    category = StatCategory.parse(category)
    if raw.get("rosterId") is None:
        raise InvalidStatEntryError(
            f"{category.value} stat entry has no rosterId "
            f"(scheduleId={raw.get('scheduleId')}, weekIndex={raw.get('weekIndex')})"
        )
    data = dict(raw)
    data["category"] = category.value
    return STAT_ENTRY_MODELS[category].model_validate(data)


# =============================================================================
# Computed Models
# =============================================================================


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class AggregatedStatLine(_CamelModel):
    """One player's season line for one category."""

    roster_id: int
    category: StatCategory
    league_id: Optional[str] = None
    games: int
    totals: dict[str, Number] = Field(default_factory=dict)
    derived: dict[str, float] = Field(default_factory=dict)
    player: Optional[Player] = None
    team: Optional[Team] = None

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a summed or derived stat by its export key."""
        if key in self.totals:
            return self.totals[key]
        return self.derived.get(key, default)

    def to_row(self) -> dict[str, Any]:
        """Flat record: rosterId plus every present total and derived field."""
        return {"rosterId": self.roster_id, **self.totals, **self.derived}


class PlayoffTeam(_CamelModel):
    """A seeded playoff team. Rebuilt on every seeding run."""

    team: Team
    standing: Standing
    seed: int = Field(ge=1, le=7)
    conference: Conference
    division: str = "Unknown"

    @property
    def team_id(self) -> int:
        return self.team.teamId


class BracketMatchup(_CamelModel):
    """One bracket slot pair. Missing teams are still to be determined."""

    id: str
    round: PlayoffRound
    conference: Optional[Conference] = None
    home_team: Optional[PlayoffTeam] = None
    away_team: Optional[PlayoffTeam] = None
    winner: Optional[PlayoffTeam] = None
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    is_played: bool = False


class PlayoffPicture(_CamelModel):
    """Seeds for both conferences plus the bracket."""

    league_id: Optional[str] = None
    afc_seeds: list[PlayoffTeam] = Field(default_factory=list)
    nfc_seeds: list[PlayoffTeam] = Field(default_factory=list)
    matchups: list[BracketMatchup] = Field(default_factory=list)

    @property
    def is_determined(self) -> bool:
        return bool(self.matchups)

    def matchup(self, matchup_id: str) -> Optional[BracketMatchup]:
        for matchup in self.matchups:
            if matchup.id == matchup_id:
                return matchup
        return None
