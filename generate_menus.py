#!/usr/bin/env python3
"""
LFG Menu Generator

Reads team and league event collections and renders them, with their tip
macros, into a single nested .mnu menu document for the game client.
"""

from __future__ import annotations

import argparse
import sys

from lfgmenus import LeagueEvent, TeamEvent
from lfgmenus.composer import MenuComposer
from lfgmenus.config import TIP_SCHEMES, MenuConfig, load_config
from lfgmenus.errors import MenuGenerationError
from lfgmenus.gateway import load_events, load_templates, write_document
from lfgmenus.partition import partition_by_level


def build_document(config: MenuConfig) -> str:
    """Load, partition and render everything. Nothing is written here."""
    env = load_templates(config.templates_dir, config.template_names)

    team_events = load_events(config.team_events_path, TeamEvent, config.categorized)
    print(f"  Loaded {len(team_events)} team event(s) from {config.team_events_path}")
    league_events = load_events(config.league_events_path, LeagueEvent, config.categorized)
    print(f"  Loaded {len(league_events)} league event(s) from {config.league_events_path}")

    group_one, group_two = partition_by_level(team_events, config.level_threshold)
    print(
        f"  {len(group_one)} below level {config.level_threshold}, "
        f"{len(group_two)} at or above"
    )

    composer = MenuComposer(
        env,
        top_level_template=config.top_level_template,
        tip_group_template=config.tip_group_template,
        categorized=config.categorized,
    )
    group_one_menus = composer.compose_menus(group_one, config.team_event_template)
    group_two_menus = composer.compose_menus(group_two, config.team_event_template)
    league_menus = composer.compose_menus(league_events, config.league_event_template)

    return composer.compose_document(group_one_menus, group_two_menus, league_menus)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate the LFG macro menu (.mnu)")
    p.add_argument("--config", help="JSON file with MenuConfig fields")
    p.add_argument("--threshold", type=int, help="Level splitting the two team menus")
    p.add_argument("--tip-scheme", choices=TIP_SCHEMES, help="Flat or categorized tips")
    p.add_argument("--templates", dest="templates_dir", help="Template directory")
    p.add_argument("--output", dest="output_file", help="Output .mnu path")
    p.add_argument(
        "--dry-run", action="store_true", help="Render everything but skip writing the output"
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        config = load_config(args.config).with_overrides(
            level_threshold=args.threshold,
            tip_scheme=args.tip_scheme,
            templates_dir=args.templates_dir,
            output_file=args.output_file,
        )
        print(f"Generating LFG menus ({config.tip_scheme} tips)...")
        document = build_document(config)

        if args.dry_run:
            print(f"  Dry run: rendered {len(document.splitlines())} line(s), nothing written")
            return 0

        path = write_document(config.output_file, document)
        print(f"  Saved {path}")
    except MenuGenerationError as e:
        print(f"ERROR [{e.stage}]: {e}", file=sys.stderr)
        return 1

    print("Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
