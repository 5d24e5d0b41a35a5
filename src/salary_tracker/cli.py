"""Salary tracker command line interface.

Provides operator tools for:
- Running the API server
- Creating the database schema
- Strict salary calculations (same rules the API enforces)
- Lenient live previews (same output the entry form shows)
- Listing stored salary records

Usage:
    salary-tracker serve --port 5001
    salary-tracker init-db
    salary-tracker calc --total 5000 --advance 2000
    salary-tracker preview --total 5000 --advance ""
    salary-tracker list --employee-id EMP001 --status Paid
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from salary_tracker.calculators.errors import SalaryCalculationError
from salary_tracker.calculators.formatting import format_currency
from salary_tracker.calculators.salary import (
    calculate_advance_percentage,
    calculate_salary_details,
)
from salary_tracker.calculators.types import MONTH_NAMES, PaymentStatus
from salary_tracker.config import get_settings
from salary_tracker.logging_config import configure_logging
from salary_tracker.preview import live_preview


def parse_amount(s: str) -> Decimal:
    """Parse a decimal amount argument."""
    try:
        return Decimal(s)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {s!r}")


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


class SalaryTrackerCli:
    """Salary tracker command line interface."""

    def __init__(self) -> None:
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="salary-tracker",
            description="Salary record management tools",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        serve = subparsers.add_parser("serve", help="Run the HTTP API")
        serve.add_argument("--host", type=str, help="Bind address (default from HOST)")
        serve.add_argument("--port", type=int, help="Port (default from PORT)")
        serve.add_argument("--reload", action="store_true", help="Reload on code changes")

        subparsers.add_parser("init-db", help="Create database tables")

        calc = subparsers.add_parser(
            "calc",
            help="Validate amounts and compute remaining salary and status",
        )
        calc.add_argument("--total", type=parse_amount, required=True, help="Total monthly salary")
        calc.add_argument("--advance", type=parse_amount, required=True, help="Advance amount paid")
        calc.add_argument("--json", action="store_true", help="Print JSON output")

        preview = subparsers.add_parser(
            "preview",
            help="Show what the entry form displays for raw input",
        )
        preview.add_argument("--total", type=str, default="", help="Total as typed")
        preview.add_argument("--advance", type=str, default="", help="Advance as typed")

        list_cmd = subparsers.add_parser("list", help="List stored salary records")
        list_cmd.add_argument("--employee-id", type=str, help="Filter by employee ID")
        list_cmd.add_argument("--month", choices=MONTH_NAMES, help="Filter by month name")
        list_cmd.add_argument("--year", type=int, help="Filter by year")
        list_cmd.add_argument(
            "--status",
            choices=[s.value for s in PaymentStatus],
            help="Filter by payment status",
        )
        list_cmd.add_argument(
            "--limit",
            type=int,
            default=50,
            help="Maximum records to show (default: 50)",
        )

        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)

        if not parsed.command:
            self.parser.print_help()
            return 1

        configure_logging(get_settings().log_level)

        # Dispatch to command handler
        handlers: dict[str, Callable[..., int]] = {
            "serve": self._cmd_serve,
            "init-db": self._cmd_init_db,
            "calc": self._cmd_calc,
            "preview": self._cmd_preview,
            "list": self._cmd_list,
        }

        handler = handlers.get(parsed.command)
        if handler:
            return handler(parsed)

        print(f"Unknown command: {parsed.command}", file=sys.stderr)
        return 1

    def _cmd_serve(self, args: argparse.Namespace) -> int:
        """Run the API with uvicorn."""
        import uvicorn

        settings = get_settings()
        uvicorn.run(
            "salary_tracker.api.app:app",
            host=args.host or settings.host,
            port=args.port or settings.port,
            reload=args.reload or settings.debug,
        )
        return 0

    def _cmd_init_db(self, args: argparse.Namespace) -> int:
        """Create the schema."""
        from salary_tracker.database import create_tables, dispose_db

        async def _init() -> None:
            await create_tables()
            await dispose_db()

        asyncio.run(_init())
        print(f"Database ready: {get_settings().database_url}")
        return 0

    def _cmd_calc(self, args: argparse.Namespace) -> int:
        """Strict calculation; exits non-zero on invalid amounts."""
        try:
            details = calculate_salary_details(
                {"totalMonthlySalary": args.total, "advanceAmountPaid": args.advance}
            )
            percentage = calculate_advance_percentage(args.total, args.advance)
        except SalaryCalculationError as e:
            print(f"ERROR [{e.code}]: {e}", file=sys.stderr)
            return 1

        if args.json:
            payload = details.to_dict()
            payload["advancePercentage"] = percentage
            print(json.dumps(payload, default=_json_default, indent=2))
            return 0

        symbol = get_settings().currency_symbol
        print(f"Total salary:      {format_currency(details.total_monthly_salary, symbol)}")
        print(f"Advance paid:      {format_currency(details.advance_amount_paid, symbol)}")
        print(f"Remaining payable: {format_currency(details.remaining_salary_payable, symbol)}")
        print(f"Advance share:     {percentage}%")
        print(f"Payment status:    {details.payment_status.value}")
        return 0

    def _cmd_preview(self, args: argparse.Namespace) -> int:
        """Lenient preview; always succeeds."""
        preview = live_preview(args.total, args.advance)
        symbol = get_settings().currency_symbol
        print(f"Remaining payable: {format_currency(preview.remaining_salary, symbol)}")
        print(f"Payment status:    {preview.payment_status}")
        return 0 if preview.is_valid else 2

    def _cmd_list(self, args: argparse.Namespace) -> int:
        """Print stored salary records."""
        from salary_tracker.database import dispose_db, get_session
        from salary_tracker.services import SalaryRecordFilter, SalaryRecordService

        filters = SalaryRecordFilter(
            employee_id=args.employee_id,
            month=args.month,
            year=args.year,
            payment_status=args.status,
        )

        async def _list() -> int:
            async with get_session() as session:
                records, total = await SalaryRecordService(session).find(
                    filters, limit=args.limit
                )
            await dispose_db()

            symbol = get_settings().currency_symbol
            for r in records:
                print(
                    f"{r.employee_id:<12} {r.employee_name:<24} {r.month:<9} {r.year}  "
                    f"{format_currency(r.total_monthly_salary, symbol):>14} "
                    f"{format_currency(r.advance_amount_paid, symbol):>14} "
                    f"{format_currency(r.remaining_salary_payable, symbol):>14}  "
                    f"{r.payment_status}"
                )
            print(f"\n{len(records)} of {total} record(s)")
            return 0

        return asyncio.run(_list())


def main() -> int:
    """CLI entry point."""
    cli = SalaryTrackerCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
