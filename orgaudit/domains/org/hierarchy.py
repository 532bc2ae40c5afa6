"""Reporting-line indexes built once per analysis run."""

from typing import TypeAlias
import logging
from collections import defaultdict

from orgaudit.domains.org.models import Employee
from orgaudit.utils.types import EmployeeID

logger = logging.getLogger(__name__)

HierarchyIndex: TypeAlias = dict[EmployeeID, list[Employee]]
EmployeeLookup: TypeAlias = dict[EmployeeID, Employee]


def build_subordinates_map(employees: list[Employee]) -> HierarchyIndex:
    """Build a manager_id -> direct reports map, preserving input order.

    Roots are never grouped as subordinates. Manager ids are not checked
    against the roster, so a bucket may belong to a manager who does not exist.
    """
    tree: HierarchyIndex = defaultdict(list)
    for employee in employees:
        if employee.manager_id is not None:
            tree[employee.manager_id].append(employee)
    return dict(tree)


def build_employee_lookup(employees: list[Employee]) -> EmployeeLookup:
    """Map each id to its employee; with duplicate ids the first record wins."""
    lookup: EmployeeLookup = {}
    for employee in employees:
        if employee.id in lookup:
            logger.warning("Duplicate employee id %d, keeping first record", employee.id)
            continue
        lookup[employee.id] = employee
    return lookup


def find_roots(employees: list[Employee]) -> list[Employee]:
    return [e for e in employees if e.is_root]


def find_dangling_references(employees: list[Employee], lookup: EmployeeLookup) -> list[Employee]:
    """Employees whose manager id matches nobody in the roster."""
    return [
        e for e in employees
        if e.manager_id is not None and e.manager_id not in lookup
    ]
