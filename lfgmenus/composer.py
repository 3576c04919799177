"""Two-pass menu composition.

Each event is rendered into a sub-menu first. The concatenated sub-menus are
then bound as plain text into the top-level template, since the menu format
has no include mechanism of its own.
"""

from __future__ import annotations

from typing import Sequence

from jinja2 import Environment, TemplateError

from lfgmenus import LeagueEvent, TeamEvent, event_context, tip_context
from lfgmenus.errors import TemplateRenderError
from lfgmenus.macros import format_tip_macros, group_tips_by_category


class MenuComposer:
    """Renders events and the top-level document through a template set."""

    def __init__(
        self,
        env: Environment,
        top_level_template: str = "lfgmacros.vm",
        tip_group_template: str = "tip_group.vm",
        categorized: bool = False,
    ) -> None:
        self.env = env
        self.top_level_template = top_level_template
        self.tip_group_template = tip_group_template
        self.categorized = categorized

    def render(self, template_name: str, context: dict) -> str:
        try:
            return self.env.get_template(template_name).render(context)
        except TemplateError as e:
            raise TemplateRenderError(f"Could not render {template_name}: {e}") from e

    def event_bindings(self, event: TeamEvent | LeagueEvent) -> dict:
        """Template context for one event.

        Tip bindings are only present when the event has tips.
        """
        context: dict = {"content": event_context(event)}
        if not event.tips:
            return context

        context["tips"] = [tip_context(tip) for tip in event.tips]
        context["tip_macros"] = format_tip_macros(event.tips)
        if self.categorized:
            context["tip_groups"] = self.render_tip_groups(event)
        return context

    def render_tip_groups(self, event: TeamEvent | LeagueEvent) -> str:
        """Render one labeled sub-fragment per non-empty tip category."""
        parts = []
        for group in group_tips_by_category(event.tips):
            parts.append(
                self.render(
                    self.tip_group_template,
                    {
                        "type": group.category.value,
                        "tips": [tip_context(tip) for tip in group.tips],
                        "tip_macros": group.macros,
                    },
                )
            )
        return "".join(parts)

    def compose_menus(
        self, events: Sequence[TeamEvent | LeagueEvent], template_name: str
    ) -> str:
        """Render each event through ``template_name`` and concatenate in order."""
        return "".join(self.render(template_name, self.event_bindings(e)) for e in events)

    def compose_document(self, group_one: str, group_two: str, league_events: str) -> str:
        return self.render(
            self.top_level_template,
            {
                "group_one": group_one,
                "group_two": group_two,
                "league_events": league_events,
            },
        )
