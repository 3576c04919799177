"""Split team events into two menu groups by level requirement."""

from __future__ import annotations

from typing import Iterable

from lfgmenus import LeagueEvent, TeamEvent
from lfgmenus.errors import InvalidVariant

# Keeps each generated sub-menu a manageable size.
DEFAULT_LEVEL_THRESHOLD = 36


def is_below_threshold(event: TeamEvent | LeagueEvent, threshold: int) -> bool:
    """True if a team event's level requirement is strictly below ``threshold``."""
    if isinstance(event, TeamEvent):
        return event.level_requirement < threshold
    if isinstance(event, LeagueEvent):
        raise InvalidVariant(f"Not a team event: {event.name!r} is a LeagueEvent")
    raise InvalidVariant(f"Not a group event: {event!r}")


def partition_by_level(
    events: Iterable[TeamEvent | LeagueEvent], threshold: int = DEFAULT_LEVEL_THRESHOLD
) -> tuple[list[TeamEvent], list[TeamEvent]]:
    """Stable partition into (low, high) around ``threshold``.

    An event is low iff ``level_requirement < threshold``. A threshold of 0
    sends every event to high.
    """
    low: list[TeamEvent] = []
    high: list[TeamEvent] = []
    for event in events:
        if is_below_threshold(event, threshold):
            low.append(event)
        else:
            high.append(event)
    return low, high
