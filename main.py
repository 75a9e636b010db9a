"""Main entry point for the campos dashboard"""

import asyncio
import argparse

from orchestrator import Orchestrator
from scheduler import RefreshScheduler
from sources import create_source
from core.enums import DisplayState
from core.exceptions import CamposError
from ui.display import ConsoleDisplay
from ui.progress import ConsoleProgress
from ui.prompts import ConsolePrompt
from utils.months import month_options
from config import settings


async def run(args: argparse.Namespace) -> int:
    source = create_source(args.workbook)
    orchestrator = Orchestrator(
        source,
        progress=ConsoleProgress(verbose=args.verbose),
        display=None
    )

    try:
        view = await orchestrator.initialize()
        if view.state == DisplayState.ERROR:
            ConsoleDisplay().show_error(view.message or "")
            return 1

        if args.interactive:
            prompt = ConsolePrompt()
            year = await prompt.select_year(orchestrator.catalog.years, orchestrator.session.year)
            await orchestrator.select_year(year)
            month = await prompt.select_month(month_options(), orchestrator.session.month)
            await orchestrator.select_month(month.value)
        else:
            if args.year:
                await orchestrator.select_year(args.year)
            if args.month:
                await orchestrator.select_month(args.month)

        orchestrator.display = ConsoleDisplay()
        view = await orchestrator.apply_filters(args.search, args.only_available)
        if view.state == DisplayState.ERROR:
            orchestrator.display.show_error(view.message or "")
            if not args.watch:
                return 1

        if args.watch:
            scheduler = RefreshScheduler(orchestrator.refresh, args.interval)
            scheduler.start()
            try:
                await asyncio.Event().wait()
            finally:
                await scheduler.stop()

        return 0

    except ValueError as e:
        print(f"Error: {e}")
        return 2
    finally:
        await source.aclose()


def main():
    parser = argparse.ArgumentParser(
        description="Campos Clínicos - clinical rotation availability"
    )
    parser.add_argument("--year", type=str, help="Year sheet to show (default: next/latest)")
    parser.add_argument("--month", type=str, help="Month token, e.g. MARZO (default: current month)")
    parser.add_argument("--search", type=str, default="", help="Filter by service or tutor")
    parser.add_argument("--only-available", action="store_true", help="Only services with free fields")
    parser.add_argument(
        "--workbook",
        type=str,
        default=settings.WORKBOOK_PATH,
        help="Local .xlsx with one sheet per year (instead of the spreadsheet)"
    )
    parser.add_argument("--watch", action="store_true", help="Keep refreshing on an interval")
    parser.add_argument(
        "--interval",
        type=float,
        default=settings.REFRESH_INTERVAL_SECONDS,
        help="Refresh interval in seconds for --watch"
    )
    parser.add_argument("--interactive", action="store_true", help="Pick year and month interactively")
    parser.add_argument("--verbose", action="store_true", help="Print stage progress")

    args = parser.parse_args()

    try:
        return asyncio.run(run(args))
    except CamposError as e:
        print(f"\n✗ {e}")
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    exit(main())
