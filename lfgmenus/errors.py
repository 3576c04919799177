"""Fatal errors raised by the menu pipeline, one per failing stage."""

from __future__ import annotations


class MenuGenerationError(Exception):
    """Base class. ``stage`` names the pipeline step that failed."""

    stage = "run"

    def __init__(self, message: str, stage: str | None = None) -> None:
        super().__init__(message)
        if stage is not None:
            self.stage = stage


class LoadError(MenuGenerationError):
    """An input collection or config file is missing or malformed."""

    stage = "load"


class InvalidVariant(MenuGenerationError):
    """A variant-specific operation was applied to the wrong event kind."""

    stage = "partition"


class InvalidTipName(MenuGenerationError):
    """A tip name does not yield a usable macro identifier."""

    stage = "tips"


class TemplateRenderError(MenuGenerationError):
    """A template is missing, unparsable, or failed to render."""

    stage = "render"


class WriteError(MenuGenerationError):
    """The output document could not be written."""

    stage = "write"
