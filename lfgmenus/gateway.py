"""Reading event collections and templates, and writing the menu document."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError
from pydantic import TypeAdapter, ValidationError

from lfgmenus import GroupEvent, LeagueEvent, TeamEvent
from lfgmenus.errors import LoadError, TemplateRenderError, WriteError

_EVENTS_ADAPTER = TypeAdapter(list[GroupEvent])


def parse_events(
    raw: str | bytes,
    expected_type: type[TeamEvent] | type[LeagueEvent] | None = None,
    categorized: bool = False,
    source: str = "<input>",
) -> list[TeamEvent | LeagueEvent]:
    """Deserialize a JSON array of group events.

    Every record must be ``expected_type`` (when given), and every tip must
    match the active tip scheme. Any failure raises LoadError and nothing is
    returned.
    """
    try:
        events = _EVENTS_ADAPTER.validate_json(raw)
    except ValidationError as e:
        raise LoadError(f"Invalid event data in {source}: {e}") from e

    for index, event in enumerate(events):
        if expected_type is not None and not isinstance(event, expected_type):
            raise LoadError(
                f"{source}[{index}] ({event.name!r}) is a {event.type}, "
                f"expected {expected_type.__name__}"
            )
        for tip in event.tips:
            if categorized and tip.category is None:
                raise LoadError(
                    f"{source}[{index}] ({event.name!r}): tip {tip.name!r} has no "
                    "category but the categorized tip scheme is active"
                )
            if not categorized and tip.category is not None:
                raise LoadError(
                    f"{source}[{index}] ({event.name!r}): tip {tip.name!r} is categorized "
                    "but the flat tip scheme is active"
                )

    return events


def load_events(
    path: str | Path,
    expected_type: type[TeamEvent] | type[LeagueEvent] | None = None,
    categorized: bool = False,
) -> list[TeamEvent | LeagueEvent]:
    """Load an event collection from a JSON file."""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise LoadError(f"Cannot read {path}: {e}") from e
    return parse_events(raw, expected_type, categorized, source=str(path))


def load_templates(templates_dir: str | Path, names: Iterable[str]) -> Environment:
    """Build the template environment and resolve every named template up front.

    Raises TemplateRenderError if a template is missing or does not parse.
    """
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    for name in names:
        try:
            env.get_template(name)
        except TemplateError as e:
            raise TemplateRenderError(
                f"Unable to load template {name!r} from {templates_dir}: {e}"
            ) from e
    return env


def _output_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_document(path: str | Path, text: str) -> Path:
    """Replace ``path`` with ``text``.

    The document is written to a temporary file beside the target and moved
    into place, so the target never holds a partial document.
    """
    path = Path(path)
    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        # mkstemp creates 0600; keep the target's mode, or the umask default.
        os.chmod(tmp_name, _output_mode(path))
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise WriteError(f"Unable to write {path}: {e}") from e
    return path
