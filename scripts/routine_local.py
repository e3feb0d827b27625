#!/usr/bin/env python3
"""
Interactive local picker harness (console front end, no browser).

Usage:
  python3 scripts/routine_local.py

What it does:
- Loads the catalog from CATALOG_PATH and restores the saved selection
- Lets you filter, select and inspect products with slash commands
- Generates a routine through ROUTINE_PROXY_URL (or OPENAI_API_KEY directly)
- Sends any other line as a follow-up question
"""

from __future__ import annotations

import os
import time

from dotenv import load_dotenv

from routine_builder.core.config import load_settings
from routine_builder.core.log_format import configure_logging
from routine_builder.infrastructure.scheduling.loop_scheduler import LoopScheduler
from routine_builder.infrastructure.ui.console_commands import dispatch
from routine_builder.infrastructure.ui.console_view import ConsoleView
from routine_builder.wiring.dependencies import build_picker


def _print_header(catalog_path: str) -> None:
    print("\nRoutine Builder")
    print("-" * 60)
    print(f"catalog: {catalog_path}")
    print("Type /help for commands, anything else to ask the advisor.")
    print("-" * 60)


def main() -> None:
    load_dotenv()
    settings = load_settings()
    configure_logging(settings.LOG_LEVEL)

    view = ConsoleView()
    scheduler = LoopScheduler()
    commands = build_picker(view, scheduler, settings=settings)

    _print_header(settings.CATALOG_PATH)
    commands.start(lang=os.getenv("LANG"))

    while True:
        try:
            line = input("\n> ")
        except (EOFError, KeyboardInterrupt):
            commands.shutdown()
            scheduler.cancel_all()
            print("\nBye!")
            return

        keep_going = dispatch(commands, line)

        # let short UI timers (focus return, highlight) fire before the next prompt
        scheduler.run_due()
        delay = scheduler.next_delay()
        while delay is not None and delay < 2.0:
            time.sleep(delay)
            scheduler.run_due()
            delay = scheduler.next_delay()

        if not keep_going:
            scheduler.cancel_all()
            print("Bye!")
            return


if __name__ == "__main__":
    main()
