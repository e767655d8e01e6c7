"""Settings administration and one-off prioritization from the command line.

Usage:
    python -m complaint_ai.tools.manage_settings seed
    python -m complaint_ai.tools.manage_settings list
    python -m complaint_ai.tools.manage_settings get aiPrioritization
    python -m complaint_ai.tools.manage_settings set aiPrioritization false --by ops
    python -m complaint_ai.tools.manage_settings prioritize \\
        --title "Bus skipped stop" --description "..." --category schedule
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from complaint_ai.application.ports.settings_store import SettingsStore
from complaint_ai.domain.entities.complaint import ComplaintSnapshot
from complaint_ai.domain.value_objects.enums import ComplaintCategory
from complaint_ai.main import Container, lifespan

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


def parse_value(raw: str) -> Any:
    """Interpret *raw* as JSON when possible (false, 3, "x"), else as a plain string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


async def _run(args: argparse.Namespace, settings_store: SettingsStore | None = None) -> int:
    # "seed" reports what it created, so startup must not seed first.
    async with lifespan(
        seed_settings=args.command != "seed", settings_store=settings_store
    ) as container:
        return await _dispatch(container, args)


async def _dispatch(container: Container, args: argparse.Namespace) -> int:
    gate = container.settings_gate

    if args.command == "seed":
        created = await gate.seed_defaults()
        print(f"Created {len(created)} setting(s): {', '.join(created) or '-'}")
        return 0

    if args.command == "list":
        print(json.dumps(await gate.list_settings(), indent=2, default=str))
        return 0

    if args.command == "get":
        value = await gate.get_flag(args.key, args.default)
        print(json.dumps({"key": args.key, "value": value}))
        return 0

    if args.command == "set":
        setting = await gate.set_flag(
            args.key, parse_value(args.value), args.by, description=args.description
        )
        print(json.dumps({"key": setting.key, "value": setting.value, "updatedBy": setting.updated_by}))
        return 0

    if args.command == "prioritize":
        try:
            snapshot = ComplaintSnapshot(
                title=args.title,
                description=args.description,
                category=args.category,
                date_time=args.date_time or datetime.now(timezone.utc).isoformat(),
                location=args.location,
                vehicle_number=args.vehicle,
            )
        except ValueError as e:
            logger.error("Invalid complaint: %s", e)
            return 2
        analysis = await container.prioritize.execute(snapshot)
        print(json.dumps(analysis.to_dict(), indent=2, ensure_ascii=False))
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Complaint prioritization settings tool")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("seed", help="Create default settings that are missing")
    sub.add_parser("list", help="Show all settings")

    get_p = sub.add_parser("get", help="Read a boolean flag")
    get_p.add_argument("key")
    get_p.add_argument(
        "--default", action=argparse.BooleanOptionalAction, default=True,
        help="Value to report when the flag is missing (default: true)",
    )

    set_p = sub.add_parser("set", help="Create or update a setting")
    set_p.add_argument("key")
    set_p.add_argument("value", help="JSON value (true, false, 3, ...) or plain string")
    set_p.add_argument("--by", required=True, help="Who is making the change")
    set_p.add_argument("--description", default=None)

    pr_p = sub.add_parser("prioritize", help="Prioritize one complaint and print the result")
    pr_p.add_argument("--title", required=True)
    pr_p.add_argument("--description", required=True)
    pr_p.add_argument(
        "--category", required=True, choices=[c.value for c in ComplaintCategory],
    )
    pr_p.add_argument("--date-time", default=None, help="Incident time (ISO 8601)")
    pr_p.add_argument("--location", default=None)
    pr_p.add_argument("--vehicle", default=None)

    return parser


def main() -> None:
    args = build_parser().parse_args()
    sys.exit(asyncio.run(_run(args)))


if __name__ == "__main__":
    main()
