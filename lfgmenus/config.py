"""Run configuration: where inputs, templates and output live."""

from __future__ import annotations

import json
from dataclasses import fields, replace
from pathlib import Path

from pydantic import ConfigDict, ValidationError
from pydantic.dataclasses import dataclass

from lfgmenus.errors import LoadError
from lfgmenus.partition import DEFAULT_LEVEL_THRESHOLD

TIP_SCHEMES = ("flat", "categorized")


@dataclass(frozen=True, config=ConfigDict(strict=True))
class MenuConfig:
    """File locations and options for a single generator run.

    Field types are enforced on construction, so a config file with a
    quoted number or a null path is rejected before anything runs.
    """

    properties_dir: str = "properties"
    team_events_file: str = "team_events.json"
    league_events_file: str = "league_events.json"
    templates_dir: str = "templates"
    top_level_template: str = "lfgmacros.vm"
    team_event_template: str = "task_strike_trial_lfg.vm"
    league_event_template: str = "league_lfg.vm"
    tip_group_template: str = "tip_group.vm"
    output_file: str = "lfgmacros.mnu"
    level_threshold: int = DEFAULT_LEVEL_THRESHOLD
    tip_scheme: str = "flat"

    def __post_init__(self) -> None:
        if self.tip_scheme not in TIP_SCHEMES:
            raise LoadError(
                f"Unknown tip scheme {self.tip_scheme!r} (expected one of {', '.join(TIP_SCHEMES)})"
            )

    @property
    def team_events_path(self) -> Path:
        return Path(self.properties_dir) / self.team_events_file

    @property
    def league_events_path(self) -> Path:
        return Path(self.properties_dir) / self.league_events_file

    @property
    def categorized(self) -> bool:
        return self.tip_scheme == "categorized"

    @property
    def template_names(self) -> list[str]:
        names = [self.top_level_template, self.team_event_template, self.league_event_template]
        if self.categorized:
            names.append(self.tip_group_template)
        return names

    def with_overrides(self, **overrides) -> MenuConfig:
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_config(path: str | Path | None = None) -> MenuConfig:
    """Load a MenuConfig from a JSON file, or return the defaults."""
    if path is None:
        return MenuConfig()

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise LoadError(f"Cannot read config {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise LoadError(f"Config {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise LoadError(f"Config {path} must be a JSON object")

    known = {f.name for f in fields(MenuConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise LoadError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    try:
        return MenuConfig(**data)
    except ValidationError as e:
        raise LoadError(f"Invalid value in config {path}: {e}") from e
