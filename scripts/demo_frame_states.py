#!/usr/bin/env python3
"""Demo harness for frame-evaluated effects.

Builds an effect from the default registry and prints a summary of its
visual state at a handful of frames.

Usage:
    python scripts/demo_frame_states.py
    python scripts/demo_frame_states.py --effect node_network --options '{"node_count": 8, "center_node": true}'
    python scripts/demo_frame_states.py --effect kinetic_text --frames 0 15 30 60 --json
"""

from __future__ import annotations

import argparse
import json
import logging

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from framekit.core.config import AppConfig, configure_logging, load_app_config
from framekit.core.effects import build_default_registry
from framekit.core.errors import InvalidConfiguration
from framekit.core.utils import summarize_state, write_json

console = Console()
logger = logging.getLogger("demo.frame_states")

DEFAULT_FRAMES = [0, 15, 30, 60, 90, 149]


def main() -> None:
    registry = build_default_registry()

    parser = argparse.ArgumentParser(
        description="Print per-frame state of a framekit effect.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--effect",
        choices=registry.registered_types,
        default="node_network",
        help="Effect type (default: node_network).",
    )
    parser.add_argument("--options", default="{}", help="Effect options as a JSON object.")
    parser.add_argument("--frames", type=int, nargs="+", default=DEFAULT_FRAMES)
    parser.add_argument("--config", default=None, help="App config file (.json/.yaml).")
    parser.add_argument("--json", action="store_true", help="Dump full frame states as JSON.")
    parser.add_argument("--out", default=None, help="Also write full frame states to this JSON file.")
    args = parser.parse_args()

    config: AppConfig = load_app_config(args.config)
    configure_logging(config)

    try:
        effect = registry.create(args.effect, json.loads(args.options), config.video)
    except (InvalidConfiguration, json.JSONDecodeError) as e:
        console.print(Panel(f"[bold red]{e}[/bold red]", title="Invalid options"))
        raise SystemExit(2) from e

    logger.info("Evaluating %s at %d frames", args.effect, len(args.frames))

    if args.out or args.json:
        states = [effect.frame_state(frame).model_dump() for frame in args.frames]
        if args.out:
            write_json(args.out, states)
            console.print(f"[dim]✓ Wrote {len(states)} frame states to {args.out}[/dim]")
        if args.json:
            console.print_json(json.dumps(states))
            return

    table = Table(title=f"{args.effect} @ {config.video.fps} fps", show_header=True)
    table.add_column("Frame", style="cyan", justify="right")
    table.add_column("State", style="green")
    for frame in args.frames:
        table.add_row(str(frame), summarize_state(effect.frame_state(frame).model_dump()))
    console.print(table)


if __name__ == "__main__":
    main()
