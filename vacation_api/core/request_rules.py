from datetime import date
from enum import Enum

from .errors import InvalidTransition


class VacationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    DENIED = "denied"


ALLOWED_STATUS = {s.value for s in VacationStatus}

# Legal edges of the request lifecycle. Approved and denied are terminal.
TRANSITIONS: dict[VacationStatus, set[VacationStatus]] = {
    VacationStatus.PENDING: {VacationStatus.APPROVED, VacationStatus.DENIED},
    VacationStatus.APPROVED: set(),
    VacationStatus.DENIED: set(),
}


def can_transition(old: str, new: str) -> bool:
    return VacationStatus(new) in TRANSITIONS[VacationStatus(old)]


def check_transition(old: str, new: str) -> bool:
    """
    Validate a status change.

    Returns True when the change must be applied and False when it repeats the
    decision already recorded (approved -> approved, denied -> denied); the
    status stays as it is. Raises InvalidTransition otherwise.
    """
    if old == new and VacationStatus(old) is not VacationStatus.PENDING:
        return False
    if not can_transition(old, new):
        raise InvalidTransition(f"Cannot change status from {old} to {new}")
    return True


def request_days(start: date, end: date) -> int:
    """Inclusive number of calendar days between start and end."""
    return (end - start).days + 1
