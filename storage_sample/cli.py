"""Command-line entry point for the storage account sample.

Exit Codes:
    0   Walkthrough completed (resources deleted or kept)
    1   Missing configuration, unavailable account name, or a failed remote call
    130 Interrupted by the user
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from storage_sample.core.config import format_settings_error, get_settings
from storage_sample.core.exceptions import NameUnavailableError, OperationFailedError
from storage_sample.services.azure_client import build_context
from storage_sample.walkthrough.reports import ReportGenerator
from storage_sample.walkthrough.runner import WalkthroughRunner

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description=(
            "Provision, inspect and delete an Azure storage account and its "
            "resource group"
        ),
        epilog=(
            "Requires AZURE_TENANT_ID, AZURE_CLIENT_ID, AZURE_CLIENT_SECRET "
            "and AZURE_SUBSCRIPTION_ID in the environment."
        ),
    )

    cleanup = parser.add_mutually_exclusive_group()
    cleanup.add_argument(
        "--yes",
        action="store_const",
        const=True,
        dest="assume_yes",
        help="Delete the sample resources without prompting",
    )
    cleanup.add_argument(
        "--keep",
        action="store_const",
        const=False,
        dest="assume_yes",
        help="Keep the sample resources without prompting",
    )

    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--json",
        action="store_true",
        help="Print the run report as JSON when finished",
    )
    output.add_argument(
        "--markdown",
        action="store_true",
        help="Print the run report as Markdown when finished",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def print_report(runner: WalkthroughRunner, args: argparse.Namespace) -> None:
    report = runner.current_report
    if report is None:
        return
    if args.json:
        print(ReportGenerator(report).to_json())
    elif args.markdown:
        print(ReportGenerator(report).to_markdown())


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    try:
        settings = get_settings()
    except ValidationError as e:
        for line in format_settings_error(e):
            print(line)
        return 1

    logging.getLogger().setLevel(logging.DEBUG if args.verbose else settings.log_level)

    try:
        context = build_context(settings)
    except ValueError as e:
        print(f"Creating Azure clients failed: {e}")
        return 1

    runner = WalkthroughRunner(context, assume_yes=args.assume_yes)

    try:
        runner.run()
        exit_code = 0

    except NameUnavailableError:
        exit_code = 1

    except OperationFailedError as e:
        print(e)
        logger.debug(f"{e.operation} error details: {e.details}", exc_info=True)
        exit_code = 1

    except KeyboardInterrupt:
        print("\nStorage walkthrough interrupted by user", file=sys.stderr)
        return 130

    print_report(runner, args)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
