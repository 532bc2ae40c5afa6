"""Manager salary audit against the average pay of their direct reports."""

from typing import TypeAlias
import logging
from decimal import Decimal, ROUND_HALF_UP

from orgaudit.domains.org.hierarchy import HierarchyIndex
from orgaudit.domains.org.models import DiscrepancyType, Employee, SalaryDiscrepancy

logger = logging.getLogger(__name__)

SalaryBand: TypeAlias = tuple[Decimal, Decimal]  # (lower, upper)


def average_salary(subordinates: list[Employee]) -> Decimal:
    """Mean salary, rounded half-up at the scale of the summed salaries.

    Whole-unit salaries average to whole units; salaries given in cents
    average to cents.
    """
    if not subordinates:
        raise ValueError("Cannot average the salary of an empty team")

    total = sum((e.salary for e in subordinates), Decimal(0))
    exponent = min(total.as_tuple().exponent, 0)
    return (total / len(subordinates)).quantize(Decimal(1).scaleb(exponent), rounding=ROUND_HALF_UP)


def salary_band(average: Decimal, low_ratio: Decimal, high_ratio: Decimal) -> SalaryBand:
    return average * low_ratio, average * high_ratio


def classify_salary(salary: Decimal, lower: Decimal, upper: Decimal) -> SalaryDiscrepancy | None:
    """Compare a salary to its band; salaries on either bound are within it."""
    if salary < lower:
        return SalaryDiscrepancy(DiscrepancyType.BELOW, lower - salary)
    if salary > upper:
        return SalaryDiscrepancy(DiscrepancyType.ABOVE, salary - upper)
    return None


def find_salary_discrepancies(
    employees: list[Employee],
    index: HierarchyIndex,
    low_ratio: Decimal,
    high_ratio: Decimal,
) -> dict[Employee, SalaryDiscrepancy]:
    """Flag every manager whose salary falls outside their team's band."""
    result: dict[Employee, SalaryDiscrepancy] = {}
    audited = 0

    for manager in employees:
        subordinates = index.get(manager.id)
        if not subordinates:
            continue

        audited += 1
        average = average_salary(subordinates)
        lower, upper = salary_band(average, low_ratio, high_ratio)
        discrepancy = classify_salary(manager.salary, lower, upper)
        if discrepancy is not None:
            logger.debug(
                "Manager %d earns %s, band [%s, %s] over %d reports",
                manager.id, manager.salary, lower, upper, len(subordinates),
            )
            result[manager] = discrepancy

    logger.info("Audited %d managers, %d outside their salary band", audited, len(result))
    return result
