"""Tip-to-macro formatting.

A tip becomes ``macro <Identifier> say <content>``. Entries are joined with
``$$``, the client's command separator, and the list never ends with one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from lfgmenus import Tip, TipCategory
from lfgmenus.errors import InvalidTipName, InvalidVariant

MACRO_SEPARATOR = "$$"
_QUOTES = ('"', "'")


@dataclass(frozen=True)
class TipGroup:
    """The non-empty tips of one category and their joined macro fragment."""

    category: TipCategory
    tips: tuple[Tip, ...]
    macros: str


def macro_identifier(name: str) -> str:
    """Strip all whitespace from a tip name to form a macro identifier."""
    identifier = "".join(ch for ch in name if not ch.isspace())
    if not identifier:
        raise InvalidTipName(f"Tip name {name!r} has no non-whitespace characters")
    if any(q in identifier for q in _QUOTES):
        raise InvalidTipName(f"Tip name {name!r} contains a quote character")
    return identifier


def format_tip_macro(tip: Tip) -> str:
    return f"macro {macro_identifier(tip.name)} say {tip.content}"


def format_tip_macros(tips: Sequence[Tip]) -> str:
    """Join per-tip macros in order, dropping the trailing separator."""
    fragment = "".join(format_tip_macro(tip) + MACRO_SEPARATOR for tip in tips)
    if fragment:
        fragment = fragment[: -len(MACRO_SEPARATOR)]
    return fragment


def group_tips_by_category(tips: Sequence[Tip]) -> list[TipGroup]:
    """Bucket categorized tips as General, Speed, Badge, skipping empty buckets.

    Input order is preserved within each bucket.
    """
    buckets: dict[TipCategory, list[Tip]] = {category: [] for category in TipCategory}
    for tip in tips:
        if tip.category is None:
            raise InvalidVariant(f"Tip {tip.name!r} has no category", stage="tips")
        buckets[tip.category].append(tip)

    return [
        TipGroup(category=category, tips=tuple(bucket), macros=format_tip_macros(bucket))
        for category, bucket in buckets.items()
        if bucket
    ]
