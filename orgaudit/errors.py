"""Exception types raised by the org audit pipeline."""


class OrgAuditError(Exception):
    """Base class for all org audit failures."""


class ConfigurationError(OrgAuditError):
    """Raised when analysis tunables are missing, non-numeric or inconsistent."""


class IngestionError(OrgAuditError):
    """Raised when an employee roster cannot be read or fails validation."""


class CyclicHierarchyError(OrgAuditError):
    """Raised when a reporting line loops back onto itself."""

    def __init__(self, cycle: tuple[int, ...]):
        self.cycle = cycle
        chain = " -> ".join(str(employee_id) for employee_id in cycle)
        super().__init__(f"Cyclic reporting line detected: {chain}")
