"""
State machine enforcement for AdoptionRequest.

ADOPTION_REQUEST_TRANSITIONS is the single source of legal transitions.
Raises InvalidTransitionError for disallowed transitions.
"""

from shelter.exceptions import InvalidTransitionError, ValidationError
from apps.adoptions.models import AdoptionStatus
from apps.animals.models import AnimalStatus

ADOPTION_REQUEST_TRANSITIONS = {
    AdoptionStatus.PENDING: [
        AdoptionStatus.INTERVIEW_SCHEDULED,
        AdoptionStatus.APPROVED,
        AdoptionStatus.REJECTED,
    ],
    AdoptionStatus.INTERVIEW_SCHEDULED: [
        AdoptionStatus.APPROVED,
        AdoptionStatus.REJECTED,
    ],
    AdoptionStatus.APPROVED: [
        AdoptionStatus.COMPLETED,
        AdoptionStatus.CANCELLED,
    ],
    AdoptionStatus.REJECTED: [],  # Terminal
    AdoptionStatus.COMPLETED: [],  # Terminal
    AdoptionStatus.CANCELLED: [],  # Terminal
}

# Statuses that hold an animal; at most one per animal at a time
ACTIVE_STATUSES = [
    status for status, targets in ADOPTION_REQUEST_TRANSITIONS.items() if targets
]


def ensure_not_terminal(current_status, target_status=None):
    """
    Reject any change to a request in an unknown or terminal status.

    Raises:
        InvalidTransitionError: If current_status allows no transitions
    """
    if current_status not in ADOPTION_REQUEST_TRANSITIONS:
        raise InvalidTransitionError(
            f"Invalid current status: {current_status}",
            {"current_status": current_status},
        )

    if is_terminal_state(current_status):
        raise InvalidTransitionError(
            f"Adoption request in status {current_status} is terminal and cannot "
            "transition",
            {"current_status": current_status, "target_status": target_status},
        )


def validate_transition(current_status, target_status):
    """
    Validate an AdoptionRequest status transition.

    A terminal current status is reported before an unknown target.

    Args:
        current_status: Current status
        target_status: Requested status

    Returns:
        bool: True if transition is allowed

    Raises:
        InvalidTransitionError: If transition is disallowed
        ValidationError: If target_status is not a known status
    """
    ensure_not_terminal(current_status, target_status)

    if target_status not in AdoptionStatus.values:
        raise ValidationError(
            f"Invalid status: {target_status}",
            {"status": [f"Must be one of: {', '.join(AdoptionStatus.values)}"]},
        )

    allowed_targets = ADOPTION_REQUEST_TRANSITIONS[current_status]

    if target_status not in allowed_targets:
        raise InvalidTransitionError(
            (
                "Invalid transition: adoption request cannot transition from "
                f"{current_status} to {target_status}"
            ),
            {
                "current_status": current_status,
                "target_status": target_status,
                "allowed_transitions": [str(s) for s in allowed_targets],
            },
        )

    return True


def is_terminal_state(status):
    """Check if a status is terminal (no transitions allowed)."""
    return (
        status in ADOPTION_REQUEST_TRANSITIONS
        and len(ADOPTION_REQUEST_TRANSITIONS[status]) == 0
    )


def allowed_transitions(status):
    return [str(s) for s in ADOPTION_REQUEST_TRANSITIONS.get(status, [])]


def animal_status_after(request_status, animal_status):
    """
    Animal status implied by a request entering request_status.

    Approved holds an Available animal as Reserved; Completed makes it
    Adopted; Rejected or Cancelled release a Reserved animal back to
    Available. Any other animal status is left untouched.

    Returns:
        str | None: New animal status, or None when unchanged
    """
    if request_status == AdoptionStatus.COMPLETED:
        return AnimalStatus.ADOPTED
    if request_status == AdoptionStatus.APPROVED:
        if animal_status == AnimalStatus.AVAILABLE:
            return AnimalStatus.RESERVED
        return None
    if request_status in (AdoptionStatus.REJECTED, AdoptionStatus.CANCELLED):
        if animal_status == AnimalStatus.RESERVED:
            return AnimalStatus.AVAILABLE
        return None
    return None
