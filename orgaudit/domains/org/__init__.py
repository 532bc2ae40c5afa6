"""Organization structure domain pipeline.

Reads an employee roster, resolves reporting-line depth, and audits manager
salaries against the pay of their direct reports.
"""

from rich.console import Console

from orgaudit.config import AnalysisConfig
from orgaudit.domains.org.analysis import AnalysisFindings, OrganisationAnalyzer, summarize_hierarchy
from orgaudit.domains.org.ingest import load_roster_frame, read_employees_csv
from orgaudit.domains.org.report import render_findings, render_summary
from orgaudit.errors import IngestionError
from orgaudit.utils.types import FilePath, OutputFormat


def validate(report_path: FilePath) -> dict[str, str | int]:
    """Validate that the roster is readable and passes schema checks."""
    try:
        df = load_roster_frame(report_path)
        return {"status": "ok", "rows_available": len(df)}
    except IngestionError as exc:
        return {"status": "error", "message": str(exc)}


def run(
    report_path: FilePath,
    config: AnalysisConfig,
    console: Console,
    fmt: OutputFormat = OutputFormat.TEXT,
    parallel: bool = False,
) -> AnalysisFindings:
    """Execute the full organization pipeline and render its findings."""
    employees = read_employees_csv(report_path)
    analyzer = OrganisationAnalyzer(config)
    subordinates = analyzer.build_subordinates_map(employees)
    findings = analyzer.analyze(employees, subordinates, parallel=parallel)

    if fmt is OutputFormat.TABLE:
        render_summary(summarize_hierarchy(employees, subordinates), console)
    render_findings(findings, console, fmt)
    return findings
