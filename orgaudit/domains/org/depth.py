"""Reporting-line depth resolution with memoization and cycle detection."""

from typing import TypeAlias
import logging

from orgaudit.domains.org.hierarchy import EmployeeLookup
from orgaudit.domains.org.models import Employee
from orgaudit.errors import CyclicHierarchyError
from orgaudit.utils.types import DepthExcess

logger = logging.getLogger(__name__)

DepthMemo: TypeAlias = dict[Employee, int]


def resolve_depth(
    employee: Employee | None,
    lookup: EmployeeLookup,
    memo: DepthMemo,
) -> int:
    """Count the management links from ``employee`` up to a root.

    Roots (and ``None``) have depth 0. A manager id that matches nobody in
    ``lookup`` counts as a single link, so such employees have depth 1.
    The chain is walked iteratively and every employee on it is memoized.

    Raises:
        CyclicHierarchyError: if the chain revisits an employee already on it,
            including an employee who is their own manager.
    """
    if employee is None or employee.is_root:
        return 0
    if employee in memo:
        return memo[employee]

    chain: list[Employee] = []
    on_chain: set[Employee] = set()
    current: Employee | None = employee
    base = 0

    while current is not None:
        if current in memo:
            base = memo[current]
            break
        if current.is_root:
            base = 0
            break
        if current in on_chain:
            start = chain.index(current)
            cycle = tuple(e.id for e in chain[start:]) + (current.id,)
            raise CyclicHierarchyError(cycle)

        chain.append(current)
        on_chain.add(current)
        current = lookup.get(current.manager_id)
        if current is None:
            logger.debug("Manager %d of employee %d not found", chain[-1].manager_id, chain[-1].id)

    for offset, member in enumerate(reversed(chain), start=1):
        memo[member] = base + offset

    return memo[employee]


def find_long_reporting_lines(
    employees: list[Employee],
    lookup: EmployeeLookup,
    threshold: int,
    memo: DepthMemo | None = None,
) -> dict[Employee, DepthExcess]:
    """Return ``depth - threshold`` for every employee deeper than ``threshold``."""
    memo = {} if memo is None else memo
    result: dict[Employee, DepthExcess] = {}

    for employee in employees:
        depth = resolve_depth(employee, lookup, memo)
        if depth > threshold:
            result[employee] = depth - threshold

    logger.info(
        "Resolved reporting depth for %d employees, %d exceed threshold %d",
        len(employees),
        len(result),
        threshold,
    )
    return result
