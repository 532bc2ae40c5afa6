"""Render analysis findings for the console.

Three output formats are supported: plain ``text`` lines, rich ``table``
output, and ``json`` for piping into other tools. Findings are always
listed in employee id order so repeated runs print identical output.
"""

import json

from rich.console import Console
from rich.table import Table

from orgaudit.domains.org.analysis import AnalysisFindings
from orgaudit.domains.org.models import DiscrepancyType, Employee, SalaryDiscrepancy
from orgaudit.utils.types import DepthExcess, HierarchySummary, OutputFormat

_DIRECTION = {
    DiscrepancyType.BELOW: "less",
    DiscrepancyType.ABOVE: "more",
}


def format_long_reporting_line(employee: Employee, excess: DepthExcess) -> str:
    return f"Employee {employee} has a reporting line that is too long by {excess}"


def format_salary_discrepancy(employee: Employee, discrepancy: SalaryDiscrepancy) -> str:
    direction = _DIRECTION[discrepancy.type]
    return f"Manager {employee} earns {direction} than they should by {discrepancy.amount}"


def _by_id(findings: dict) -> list[tuple]:
    return sorted(findings.items(), key=lambda item: (item[0].id, item[0].last_name))


def findings_to_lines(findings: AnalysisFindings) -> list[str]:
    lines = [
        format_salary_discrepancy(employee, discrepancy)
        for employee, discrepancy in _by_id(findings.salary_discrepancies)
    ]
    lines.extend(
        format_long_reporting_line(employee, excess)
        for employee, excess in _by_id(findings.long_reporting_lines)
    )
    return lines


def findings_to_dict(findings: AnalysisFindings) -> dict[str, list[dict]]:
    return {
        "salary_discrepancies": [
            {
                "id": employee.id,
                "name": employee.full_name,
                "type": discrepancy.type.value,
                "amount": str(discrepancy.amount),
            }
            for employee, discrepancy in _by_id(findings.salary_discrepancies)
        ],
        "long_reporting_lines": [
            {"id": employee.id, "name": employee.full_name, "excess": excess}
            for employee, excess in _by_id(findings.long_reporting_lines)
        ],
    }


def _build_tables(findings: AnalysisFindings) -> list[Table]:
    salary_table = Table(title="Salary Discrepancies")
    salary_table.add_column("Manager", style="cyan")
    salary_table.add_column("Salary", justify="right")
    salary_table.add_column("Direction", style="bold")
    salary_table.add_column("Amount", justify="right")
    for employee, discrepancy in _by_id(findings.salary_discrepancies):
        colour = "red" if discrepancy.type is DiscrepancyType.BELOW else "yellow"
        salary_table.add_row(
            str(employee),
            str(employee.salary),
            f"[{colour}]{_DIRECTION[discrepancy.type]}[/{colour}]",
            str(discrepancy.amount),
        )

    depth_table = Table(title="Long Reporting Lines")
    depth_table.add_column("Employee", style="cyan")
    depth_table.add_column("Too long by", justify="right")
    for employee, excess in _by_id(findings.long_reporting_lines):
        depth_table.add_row(str(employee), str(excess))

    return [salary_table, depth_table]


def render_findings(
    findings: AnalysisFindings,
    console: Console,
    fmt: OutputFormat = OutputFormat.TEXT,
) -> None:
    match fmt:
        case OutputFormat.TEXT:
            for line in findings_to_lines(findings):
                console.print(line, markup=False, highlight=False, soft_wrap=True)
        case OutputFormat.TABLE:
            for table in _build_tables(findings):
                console.print(table)
        case OutputFormat.JSON:
            console.print_json(json.dumps(findings_to_dict(findings)))
        case other:
            raise ValueError(f"Unsupported output format: {other}")


def render_summary(summary: HierarchySummary, console: Console) -> None:
    console.print(
        f"[bold]{summary.headcount}[/bold] employees, "
        f"{summary.manager_count} managers, "
        f"{summary.root_count} root(s), "
        f"max depth {summary.max_depth}"
    )
    if summary.dangling_count:
        console.print(
            f"[yellow]{summary.dangling_count} employee(s) report to an unknown manager[/yellow]"
        )
