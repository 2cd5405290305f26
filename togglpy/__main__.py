"""Main module for the togglpy package."""
import os
import sys
import logging
import argparse
from datetime import datetime
from typing import Callable, List, Optional, Sequence, Tuple

from tabulate import tabulate

from .api.client import TogglClient
from .config import (DEFAULT_ENV_FILE, Settings, load_environment, persist_settings,
                     resolve_settings, resolve_token)
from .errors import ConfigError, TogglError
from .reports.summary import Report, aggregate_summary
from .reports.report_generator import format_report
from .utils.date_utils import DateRange, PeriodSelector, day_str, resolve_period
from .utils.file_utils import copy_to_clipboard

logger = logging.getLogger(__name__)

PERIOD_CHOICES = [PeriodSelector.LAST_WEEK, PeriodSelector.THIS_WEEK]


# --- Prompting ---
class ConsolePrompter:
    """Asks the user for missing values on the terminal."""

    def __init__(self, input_func: Callable[[str], str] = input):
        self.input_func = input_func

    def ask(self, message: str) -> str:
        """Ask a free-text question.

        Raises:
            ConfigError: If the input stream is closed
        """
        try:
            return self.input_func(f"{message} ").strip()
        except EOFError as e:
            raise ConfigError("Input closed before a value was given.") from e

    def choose(self, message: str, choices: Sequence[str]) -> int:
        """Let the user pick one of several choices by number.

        Args:
            message: Question shown above the choices
            choices: Labels to choose from

        Returns:
            Index of the chosen label (the first one if the answer is blank)
        """
        print(message)
        print(tabulate([[i + 1, label] for i, label in enumerate(choices)], headers=["#", "Choice"], tablefmt="github"))
        while True:
            answer = self.ask(f"Number [1-{len(choices)}, default 1]:")
            if not answer:
                return 0
            if answer.isdigit() and 1 <= int(answer) <= len(choices):
                return int(answer) - 1
            print(f"Please enter a number between 1 and {len(choices)}.")


def prompt_for_period(prompter) -> PeriodSelector:
    """Ask which week the report should cover."""
    index = prompter.choose("Select the period of the report", [p.value for p in PERIOD_CHOICES])
    return PERIOD_CHOICES[index]


# --- CLI Logic ---
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Build a weekly report from your Toggl Track entries and copy it to the clipboard.",
        epilog="""
Examples:
    # Ask for everything that is not in .env
  togglpy
    ---
    # Report on last week without the period prompt
  togglpy --period last
    ---
    # Report on this week in Berlin time
  togglpy --period this --timezone Europe/Berlin
    ---
    # List the workspaces your token can see
  togglpy --list
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        prog="togglpy"
    )
    parser.add_argument('-l', '--list', action='store_true', help='List workspaces with their IDs')
    parser.add_argument('--period', choices=['this', 'last'], help='Report period: this week or last week (prompted if omitted)')
    parser.add_argument('--env-file', default=DEFAULT_ENV_FILE, help=f'Dotenv file with API_TOKEN and WORKSPACE_ID (default: {DEFAULT_ENV_FILE})')
    parser.add_argument('--timezone', help='IANA timezone the week boundaries are computed in (default: TOGGL_TIMEZONE or UTC)')
    parser.add_argument('--no-copy', action='store_true', help='Do not copy the report to the clipboard')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log API requests')
    return parser.parse_args(argv)


def list_workspaces(client: TogglClient) -> None:
    """Print the workspaces visible to the client's token."""
    workspaces = client.get_workspaces()
    print("\nWorkspaces:")
    print(tabulate([[ws.name, ws.id] for ws in workspaces], headers=["Name", "ID"], tablefmt="github"))


def build_report(client: TogglClient, settings: Settings, selector: PeriodSelector,
                 now: Optional[datetime] = None) -> Tuple[DateRange, Report]:
    """Resolve the period, fetch its summary and aggregate it.

    Args:
        client: Authenticated API client
        settings: Resolved settings (workspace and timezone are used)
        selector: Reporting window
        now: Reference instant (defaults to the current time)

    Returns:
        Tuple of (date_range, report)
    """
    date_range = resolve_period(selector, now, settings.tzinfo)
    print(f"📅 Period: {day_str(date_range.since)} → {day_str(date_range.until)}")
    raw = client.get_summary(settings.workspace_id, date_range)
    return date_range, aggregate_summary(raw)


def main(argv: Optional[List[str]] = None, prompter=None, environ=None) -> int:
    """Main entry point.

    Returns:
        Process exit status
    """
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    prompter = prompter or ConsolePrompter()
    load_environment(args.env_file)
    environ = os.environ if environ is None else environ

    try:
        if args.list:
            list_workspaces(TogglClient(resolve_token(environ, prompter)))
            return 0

        settings = resolve_settings(environ, prompter, client_factory=TogglClient, timezone=args.timezone)
        persist_settings(args.env_file, settings)

        selector = PeriodSelector.from_label(args.period) if args.period else prompt_for_period(prompter)
        _, report = build_report(TogglClient(settings.api_token), settings, selector)
    except TogglError as e:
        logger.debug("Run aborted", exc_info=True)
        print(f"[ERROR] {e}")
        return 1

    report_text = format_report(report)
    print("This is your report:\n")
    print(report_text)

    if not args.no_copy and copy_to_clipboard(report_text):
        print("\nYour report has been copied to your clipboard!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
