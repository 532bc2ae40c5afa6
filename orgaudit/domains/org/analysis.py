"""Orchestrates the reporting-line and salary analyses over one roster snapshot."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from orgaudit.config import AnalysisConfig
from orgaudit.domains.org.compensation import find_salary_discrepancies
from orgaudit.domains.org.depth import find_long_reporting_lines, resolve_depth
from orgaudit.domains.org.hierarchy import (
    HierarchyIndex,
    build_employee_lookup,
    build_subordinates_map,
    find_dangling_references,
    find_roots,
)
from orgaudit.domains.org.models import Employee, SalaryDiscrepancy
from orgaudit.utils.types import DepthExcess, HierarchySummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisFindings:
    long_reporting_lines: dict[Employee, DepthExcess] = field(default_factory=dict)
    salary_discrepancies: dict[Employee, SalaryDiscrepancy] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.long_reporting_lines and not self.salary_discrepancies


def summarize_hierarchy(employees: list[Employee], index: HierarchyIndex) -> HierarchySummary:
    """Headcount and shape metrics for a roster snapshot."""
    lookup = build_employee_lookup(employees)
    memo: dict[Employee, int] = {}
    max_depth = max((resolve_depth(e, lookup, memo) for e in employees), default=0)
    return HierarchySummary(
        headcount=len(employees),
        manager_count=sum(1 for e in employees if index.get(e.id)),
        root_count=len(find_roots(employees)),
        dangling_count=len(find_dangling_references(employees, lookup)),
        max_depth=max_depth,
    )


class OrganisationAnalyzer:
    """Runs both organizational diagnostics with a fixed configuration."""

    def __init__(self, config: AnalysisConfig):
        self.config = config

    def build_subordinates_map(self, employees: list[Employee]) -> HierarchyIndex:
        return build_subordinates_map(employees)

    def find_long_reporting_lines(
        self,
        employees: list[Employee],
        index: HierarchyIndex,
    ) -> dict[Employee, DepthExcess]:
        # The index groups by manager; depth needs the reverse, id -> employee.
        lookup = build_employee_lookup(employees)
        for employee in find_dangling_references(employees, lookup):
            logger.warning(
                "Employee %s reports to unknown manager %d", employee, employee.manager_id
            )
        return find_long_reporting_lines(
            employees, lookup, self.config.hierarchy_depth_threshold
        )

    def find_salary_discrepancies(
        self,
        employees: list[Employee],
        index: HierarchyIndex,
    ) -> dict[Employee, SalaryDiscrepancy]:
        return find_salary_discrepancies(
            employees,
            index,
            self.config.low_salary_ratio,
            self.config.high_salary_ratio,
        )

    def analyze(
        self,
        employees: list[Employee],
        index: HierarchyIndex | None = None,
        parallel: bool = False,
    ) -> AnalysisFindings:
        """Run both analyses and collect their findings.

        With ``parallel`` the two analyses run on separate worker threads.
        They share only the read-only index; each owns its depth memo.
        """
        if index is None:
            index = self.build_subordinates_map(employees)

        if parallel:
            with ThreadPoolExecutor(max_workers=2, thread_name_prefix="orgaudit") as executor:
                depth_future = executor.submit(self.find_long_reporting_lines, employees, index)
                salary_future = executor.submit(self.find_salary_discrepancies, employees, index)
                long_lines = depth_future.result()
                discrepancies = salary_future.result()
        else:
            long_lines = self.find_long_reporting_lines(employees, index)
            discrepancies = self.find_salary_discrepancies(employees, index)

        logger.info(
            "Analyzed %d employees: %d long reporting lines, %d salary discrepancies",
            len(employees),
            len(long_lines),
            len(discrepancies),
        )
        return AnalysisFindings(
            long_reporting_lines=long_lines,
            salary_discrepancies=discrepancies,
        )
