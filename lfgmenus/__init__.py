"""LFG Menu Generator: shared data models."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# Unsigned byte fields; bools and numeric strings are rejected.
U8 = Annotated[int, Field(ge=0, le=255, strict=True)]
Text = Annotated[str, Field(strict=True)]


class TipCategory(str, Enum):
    """Tip categories, declared in rendering order."""

    GENERAL = "General"
    SPEED = "Speed"
    BADGE = "Badge"


class Tip(BaseModel):
    """A short hint attached to an event.

    In the flat scheme ``category`` is None. In the categorized scheme it is
    read from the ``type`` key of the record.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: Text
    content: Text
    category: TipCategory | None = Field(default=None, alias="type")


class TeamEvent(BaseModel):
    """A task force, strike force or trial."""

    model_config = ConfigDict(frozen=True)

    type: Literal["TeamEvent"] = "TeamEvent"
    name: Text
    level_requirement: U8
    merits: U8
    team_size: U8
    location: Text
    tips: tuple[Tip, ...]


class LeagueEvent(BaseModel):
    """A league-sized event such as an incarnate trial."""

    model_config = ConfigDict(frozen=True)

    type: Literal["LeagueEvent"] = "LeagueEvent"
    name: Text
    requirements: Text
    rewards: Text
    league_size: U8
    location: Text
    tips: tuple[Tip, ...]


GroupEvent = Annotated[Union[TeamEvent, LeagueEvent], Field(discriminator="type")]


def event_context(event: TeamEvent | LeagueEvent) -> dict:
    """Convert an event to the plain dict bound as ``content`` in templates."""
    return event.model_dump(mode="json", by_alias=True, exclude_none=True)


def tip_context(tip: Tip) -> dict:
    """Convert a tip to the plain dict bound in the ``tips`` list."""
    return tip.model_dump(mode="json", by_alias=True, exclude_none=True)
