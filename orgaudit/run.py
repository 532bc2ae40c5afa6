"""Main runner — loads config, validates the roster and reports org findings."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from orgaudit.config import DEFAULT_CONFIG_FILE, AnalysisConfig, load_analysis_config
from orgaudit.domains import org
from orgaudit.errors import OrgAuditError
from orgaudit.utils.types import OutputFormat

console = Console()
error_console = Console(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=error_console, rich_tracebacks=True)],
        force=True,
    )


def resolve_report_path(cli_path: str | None, config: AnalysisConfig) -> Path:
    """Pick the roster path from the command line, falling back to config."""
    if cli_path:
        return Path(cli_path)
    if config.report_path is not None:
        return config.report_path
    raise OrgAuditError("Path to report is not specified")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orgaudit",
        description="Report long reporting lines and manager salary discrepancies",
    )
    parser.add_argument(
        "--report", "--app.report.path",
        dest="report",
        type=str,
        help="Employee roster CSV (overrides app.report.path from config)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_FILE,
        help="Configuration file (.properties, .toml or .yaml)",
    )
    parser.add_argument(
        "--format",
        dest="fmt",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="Output format",
    )
    parser.add_argument("--parallel", action="store_true", help="Run both analyses concurrently")
    parser.add_argument("--validate", action="store_true", help="Only validate the roster, don't analyze")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def _print_validation(report_path: Path, result: dict) -> bool:
    table = Table(title="Validation Results")
    table.add_column("Report")
    table.add_column("Valid")
    table.add_column("Details")

    match result:
        case {"status": "ok", "rows_available": rows}:
            table.add_row(str(report_path), "[green]✓[/green]", f"{rows} rows")
            valid = True
        case {"status": "error", "message": msg}:
            table.add_row(str(report_path), "[red]✗[/red]", msg)
            valid = False
        case _:
            table.add_row(str(report_path), "[red]✗[/red]", "Unknown validation result")
            valid = False

    console.print(table)
    return valid


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = load_analysis_config(args.config)
        report_path = resolve_report_path(args.report, config)

        if args.validate:
            return 0 if _print_validation(report_path, org.validate(report_path)) else 1

        org.run(
            report_path,
            config,
            console,
            fmt=OutputFormat(args.fmt),
            parallel=args.parallel,
        )
    except OrgAuditError as exc:
        error_console.print(str(exc), style="red", markup=False, highlight=False)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
