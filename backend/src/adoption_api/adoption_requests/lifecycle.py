"""Adoption request lifecycle rules.

State model:
    NEW -> REVIEWED -> UNDER_EVALUATION -> APPROVED | REJECTED

NEW is the only initial state and is always assigned by the server.
Administrators may set any of the five statuses directly: membership in
RequestStatus is the only check applied on update, so moving a request
back (for example APPROVED -> NEW) is accepted.

Submission eligibility rules are plain functions so the API schema, the
service layer and tests share one definition.
"""

from typing import FrozenSet, Optional

from ..errors import AnimalNotAvailableError
from ..models.animal import Animal
from ..models.enums import AnimalStatus, RequestStatus

MIN_ADOPTER_AGE = 18
MIN_MOTIVATION_LENGTH = 20

INITIAL_STATUS = RequestStatus.NEW

# Animals that still accept new applications
REQUESTABLE_ANIMAL_STATUSES: FrozenSet[AnimalStatus] = frozenset({
    AnimalStatus.AVAILABLE,
    AnimalStatus.IN_PROCESS,
    AnimalStatus.IN_TRANSIT,
})

# Expected review flow; departures are logged, not rejected
EXPECTED_NEXT_STATUSES = {
    RequestStatus.NEW: {RequestStatus.REVIEWED},
    RequestStatus.REVIEWED: {RequestStatus.UNDER_EVALUATION},
    RequestStatus.UNDER_EVALUATION: {RequestStatus.APPROVED, RequestStatus.REJECTED},
    RequestStatus.APPROVED: set(),
    RequestStatus.REJECTED: set(),
}


def require_adult(age: int) -> int:
    if age < MIN_ADOPTER_AGE:
        raise ValueError(f"Applicant must be at least {MIN_ADOPTER_AGE} years old")
    return age


def require_motivation(text: str) -> str:
    text = (text or "").strip()
    if len(text) < MIN_MOTIVATION_LENGTH:
        raise ValueError(
            f"Motivation must be at least {MIN_MOTIVATION_LENGTH} characters long"
        )
    return text


def require_household_agreement(value: bool) -> bool:
    if value is not True:
        raise ValueError("Every household member must agree to the adoption")
    return value


def require_sterilization_commitment(value: bool) -> bool:
    if value is not True:
        raise ValueError("The sterilization commitment must be accepted")
    return value


def accepts_requests(status: AnimalStatus) -> bool:
    return status in REQUESTABLE_ANIMAL_STATUSES


def ensure_animal_accepts_requests(animal: Animal) -> None:
    """Raise AnimalNotAvailableError for animals that are no longer listed."""
    if not accepts_requests(animal.estado):
        raise AnimalNotAvailableError()


def is_terminal(status: RequestStatus) -> bool:
    return not EXPECTED_NEXT_STATUSES[status]


def follows_review_flow(current: RequestStatus, target: RequestStatus) -> bool:
    return target in EXPECTED_NEXT_STATUSES[current]


def resolve_status_update(
    current: RequestStatus,
    requested: RequestStatus,
) -> Optional[RequestStatus]:
    """Status to store for an update, or None when nothing changes.

    Any RequestStatus member is accepted regardless of ``current``.
    """
    if requested == current:
        return None
    return RequestStatus(requested)
