"""
Command-line interface for the sales summary.
"""
import argparse
import logging
import sys
from typing import List, Optional

from sales_dashboard.main import SummaryReport, run_summary
from sales_dashboard.utils.date_helpers import month_index
from sales_dashboard.utils.errors import SalesDashboardError
from sales_dashboard.utils.formatting import format_currency, format_transactions
from sales_dashboard.utils.logging_config import setup_logging
from sales_dashboard.utils.validation import validate_day, validate_month_name, validate_year


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args (Optional[List[str]]): Command-line arguments (uses sys.argv if None)

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Sales Dashboard - Summarize sales from the live store"
    )

    parser.add_argument(
        "--month",
        type=str,
        help="Month name to filter by, e.g. January (default: all months)"
    )

    parser.add_argument(
        "--year",
        type=int,
        help="Year to filter by (default: all years)"
    )

    parser.add_argument(
        "--day",
        type=int,
        help="Day of month to filter by; requires --month and --year"
    )

    parser.add_argument(
        "--export",
        type=str,
        metavar="DIR",
        help="Write sales.csv and monthly_totals.csv to this directory"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser.parse_args(args)


def format_report(report: SummaryReport) -> str:
    """
    Render a report as plain text.

    Args:
        report (SummaryReport): The report to render

    Returns:
        str: Summary lines followed by the monthly table
    """
    summary = report.summary
    lines = [
        f"Total Products Sold: {summary.count} ({format_currency(summary.total)})",
        f"Total Cash Sales: {format_currency(summary.cash_total)} ({format_transactions(summary.cash_count)})",
        f"Total Online Sales: {format_currency(summary.online_total)} ({format_transactions(summary.online_count)})",
        "",
        f"{'Month':<6}{'Cash':>14}{'Online':>14}",
    ]
    for row in report.monthly.itertuples(index=False):
        lines.append(f"{row.month:<6}{row.Cash:>14.2f}{row.Online:>14.2f}")
    return "\n".join(lines)


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        args (Optional[List[str]]): Command-line arguments (uses sys.argv if None)

    Returns:
        int: Exit code (0 for success, non-zero for errors)
    """
    parsed_args = parse_args(args)

    log_level = logging.DEBUG if parsed_args.verbose else logging.INFO
    setup_logging(log_level=log_level)

    month = None
    if parsed_args.month:
        if not validate_month_name(parsed_args.month):
            print(f"Error: Unknown month: {parsed_args.month}")
            return 1
        month = month_index(parsed_args.month)

    if parsed_args.year is not None and not validate_year(parsed_args.year):
        print(f"Error: Invalid year: {parsed_args.year}")
        return 1

    if parsed_args.day is not None and not validate_day(parsed_args.day, month, parsed_args.year):
        print(f"Error: --day {parsed_args.day} needs a valid --month and --year.")
        return 1

    try:
        report = run_summary(
            month=month,
            year=parsed_args.year,
            day=parsed_args.day,
            output_dir=parsed_args.export,
            log_level=log_level
        )
    except SalesDashboardError as e:
        print(f"\nError reading sales: {str(e)}")
        if parsed_args.verbose:
            import traceback
            traceback.print_exc()
        return 1

    print(format_report(report))
    if report.output_dir:
        print(f"\nExported to {report.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
