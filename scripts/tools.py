"""Utility entrypoints for the booking client.

Provides quick CLI hooks into the submission and status workflows for manual
checks against a running backend.
"""

from __future__ import annotations
from tracking import t

import argparse
import asyncio
from typing import List, Optional

from bookings.contracts import BookingContext, FormInput, NavigationKind
from bookings.formatting import build_booking_summary, build_status_view
from clientapp.container import DependencyContainer
from infrastructure.settings import get_settings
from logging_config import setup_logging


async def submit_booking(args: argparse.Namespace) -> int:
    t('scripts.tools.submit_booking')
    container = DependencyContainer()
    try:
        context = BookingContext(court_id=args.court, date=args.date, time=args.time, price=args.price)
        for field in build_booking_summary(context, container.translator):
            print(f"{field.label}: {field.value}")

        orchestrator = container.build_submission_orchestrator()
        outcome = await orchestrator.submit(
            FormInput(
                name=args.name,
                phone=args.phone,
                email=args.email or "",
                team_name=args.team or "",
                find_opponent=args.find_opponent,
            ),
            context,
        )
    finally:
        await container.aclose()

    print(outcome.message)
    if outcome.navigation is None:
        return 1
    if outcome.navigation.kind is NavigationKind.EXTERNAL:
        print(f"Open to pay: {outcome.navigation.target}")
    else:
        print(f"Check status with: status {outcome.navigation.target}")
    return 0


async def show_status(args: argparse.Namespace) -> int:
    t('scripts.tools.show_status')
    container = DependencyContainer()
    try:
        fetcher = container.build_status_fetcher(initial_booking_id=args.booking_id)
        outcome = await fetcher.refresh()
    finally:
        await container.aclose()

    if outcome.booking is None:
        print(outcome.message)
        return 1
    for field in build_status_view(outcome.booking, container.translator, container.settings.timezone):
        print(f"{field.label}: {field.value}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    t('scripts.tools.build_parser')
    parser = argparse.ArgumentParser(description="Court booking client helpers")
    subparsers = parser.add_subparsers(dest="command", required=True)

    submit = subparsers.add_parser("submit", help="Book a court slot and request payment")
    submit.add_argument("--court", required=True, help="Court id, e.g. 12 or court-12")
    submit.add_argument("--date", required=True, help="Slot date as YYYY-MM-DD")
    submit.add_argument("--time", required=True, help="Slot range as HH:MM-HH:MM")
    submit.add_argument("--name", required=True)
    submit.add_argument("--phone", required=True)
    submit.add_argument("--email")
    submit.add_argument("--team")
    submit.add_argument("--price", type=float)
    submit.add_argument("--find-opponent", action="store_true")

    status = subparsers.add_parser("status", help="Show a booking's current status")
    status.add_argument("booking_id", nargs="?", help="Defaults to the last booking")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    t('scripts.tools.main')
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(production_mode=settings.production_mode)

    if args.command == "submit":
        return asyncio.run(submit_booking(args))
    return asyncio.run(show_status(args))


if __name__ == "__main__":
    raise SystemExit(main())
