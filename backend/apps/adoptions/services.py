"""
Adoption services - all adoption request mutations flow through this layer.

Rules:
- Request, animal and activity log writes share one transaction.atomic block
- The request row is locked with select_for_update before its status is read
- Transitions are checked against the state machine before any write
- Every successful mutation appends exactly one activity log entry
"""

import logging
from datetime import datetime

from django.db import transaction
from django.db.models import Count, Q
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from shelter.exceptions import NotFoundError, PermissionDeniedError, ValidationError
from shelter.middleware import get_current_request_id
from shelter.permissions import ADMIN, ADOPTER, STAFF
from apps.activity.services import log_activity
from apps.adoptions.models import AdoptionRequest, AdoptionStatus
from apps.adoptions.state_machine import (
    ACTIVE_STATUSES,
    animal_status_after,
    ensure_not_terminal,
    validate_transition,
)
from apps.animals.models import Animal, AnimalStatus
from apps.animals.services import get_animal, set_animal_status

logger = logging.getLogger(__name__)


def _get_user(user_id):
    from apps.users.models import User

    try:
        return User.objects.get(id=user_id)
    except (User.DoesNotExist, ValueError, TypeError):
        raise NotFoundError(f"User {user_id} does not exist")


def _parse_interview_date(value):
    """
    Coerce an interview date to an aware datetime.

    Accepts a datetime, an ISO 8601 datetime string or a bare date string.

    Raises:
        ValidationError: If value is missing or unparseable
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(
            "Interview date is required when scheduling an interview",
            {"interview_date": ["This field is required."]},
        )

    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value).strip()
        try:
            parsed = parse_datetime(text)
            if parsed is None:
                day = parse_date(text)
                parsed = datetime(day.year, day.month, day.day) if day else None
        except ValueError:
            parsed = None
        if parsed is None:
            raise ValidationError(
                "Interview date is not a valid date",
                {"interview_date": [f"Could not parse: {text}"]},
            )

    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed


def submit_request(animal_id, adopter_id, request=None):
    """
    Create a Pending adoption request for an Available animal.

    Args:
        animal_id: Animal identifier
        adopter_id: User identifier of the submitting adopter
        request: Optional HTTP request, recorded on the activity log

    Returns:
        AdoptionRequest: Created request

    Raises:
        NotFoundError: If animal or adopter does not exist
        ValidationError: If the animal is not Available or already has an
            active request
    """
    adopter = _get_user(adopter_id)

    with transaction.atomic():
        animal = get_animal(animal_id, for_update=True)

        if animal.current_status != AnimalStatus.AVAILABLE:
            raise ValidationError(
                "This animal is not available for adoption",
                {"animal_status": animal.current_status},
            )

        if AdoptionRequest.objects.filter(
            animal=animal, status__in=ACTIVE_STATUSES
        ).exists():
            raise ValidationError(
                "This animal already has an active adoption request",
                {"animal_id": animal.id},
            )

        adoption = AdoptionRequest.objects.create(
            animal=animal,
            adopter=adopter,
            status=AdoptionStatus.PENDING,
        )

        log_activity(
            actor_id=adopter.id,
            action_type="CREATE_ADOPTION_REQUEST",
            description=(
                f"Submitted adoption request ID: {adoption.id} "
                f"for animal: {animal.name}"
            ),
            entity_type="AdoptionRequest",
            entity_id=adoption.id,
            request=request,
        )

    logger.info(
        "adoption_request_submitted",
        extra={
            "operation": "CREATE_ADOPTION_REQUEST",
            "entity_id": str(adoption.id),
            "request_id": get_current_request_id(),
        },
    )
    return adoption


def process_request(
    request_id,
    new_status,
    staff_id,
    comments=None,
    interview_date=None,
    request=None,
    action_type="PROCESS_ADOPTION",
):
    """
    Move an adoption request to new_status and apply the animal side effect.

    The request, the animal and the activity log entry are written in one
    transaction; on any failure none of them change.

    Args:
        request_id: AdoptionRequest identifier
        new_status: Target status
        staff_id: User identifier of the acting user
        comments: Optional staff comments; None keeps existing comments
        interview_date: Required when new_status is Interview Scheduled,
            ignored otherwise
        request: Optional HTTP request, recorded on the activity log
        action_type: Activity log action type

    Returns:
        AdoptionRequest: Updated request

    Raises:
        NotFoundError: If the request or acting user does not exist
        ValidationError: If new_status is unknown or interview_date is
            missing or malformed
        InvalidTransitionError: If the transition is not allowed
    """
    staff = _get_user(staff_id)

    with transaction.atomic():
        try:
            adoption = AdoptionRequest.objects.select_for_update().get(id=request_id)
        except (AdoptionRequest.DoesNotExist, ValueError, TypeError):
            raise NotFoundError(f"Adoption request {request_id} does not exist")

        previous_status = adoption.status
        ensure_not_terminal(previous_status, new_status)

        if new_status not in AdoptionStatus.values:
            raise ValidationError(
                f"Invalid status: {new_status}",
                {"status": [f"Must be one of: {', '.join(AdoptionStatus.values)}"]},
            )

        scheduled_at = None
        if new_status == AdoptionStatus.INTERVIEW_SCHEDULED:
            scheduled_at = _parse_interview_date(interview_date)

        validate_transition(previous_status, new_status)

        adoption.status = new_status
        adoption.processed_by = staff
        if comments is not None:
            adoption.staff_comments = comments
        if scheduled_at is not None:
            adoption.interview_date = scheduled_at
        adoption.save()

        animal = Animal.objects.select_for_update().get(id=adoption.animal_id)
        target_animal_status = animal_status_after(new_status, animal.current_status)
        if target_animal_status is not None:
            set_animal_status(animal, target_animal_status)

        log_activity(
            actor_id=staff.id,
            action_type=action_type,
            description=(
                f"Processed adoption request ID: {adoption.id} - "
                f"Status: {previous_status} -> {new_status}"
            ),
            entity_type="AdoptionRequest",
            entity_id=adoption.id,
            request=request,
        )

    logger.info(
        "adoption_request_processed",
        extra={
            "operation": action_type,
            "entity_id": str(adoption.id),
            "request_id": get_current_request_id(),
            "previous_status": previous_status,
            "new_status": new_status,
        },
    )
    return adoption


def cancel_request(request_id, actor, comments=None, request=None):
    """
    Cancel an Approved adoption request.

    Staff and admins may cancel any request; an adopter only their own.

    Raises:
        NotFoundError: If the request does not exist
        PermissionDeniedError: If actor may not cancel this request
        InvalidTransitionError: If the request is not Approved
    """
    adoption = get_request(request_id)

    is_owner = actor.role == ADOPTER and adoption.adopter_id == actor.id
    if actor.role not in (STAFF, ADMIN) and not is_owner:
        raise PermissionDeniedError("You can only cancel your own adoption requests")

    return process_request(
        request_id,
        AdoptionStatus.CANCELLED,
        actor.id,
        comments=comments,
        request=request,
        action_type="CANCEL_ADOPTION",
    )


def visible_requests(user):
    """Base queryset of requests a user may read; adopters see only their own."""
    queryset = AdoptionRequest.objects.select_related(
        "animal", "adopter", "processed_by"
    )
    if user.role == ADOPTER:
        queryset = queryset.filter(adopter_id=user.id)
    return queryset


def list_requests(user, status=None, animal_id=None, adopter_id=None, search=None):
    """
    List adoption requests visible to user, newest first.

    Raises:
        ValidationError: If a filter value is malformed
    """
    queryset = visible_requests(user)

    if status:
        if status not in AdoptionStatus.values:
            raise ValidationError("Invalid status filter")
        queryset = queryset.filter(status=status)

    for field, value in (("animal_id", animal_id), ("adopter_id", adopter_id)):
        if value in (None, ""):
            continue
        try:
            queryset = queryset.filter(**{field: int(value)})
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid {field} filter")

    search = (search or "").strip()
    if search:
        queryset = queryset.filter(
            Q(animal__name__icontains=search)
            | Q(animal__breed__icontains=search)
            | Q(animal__type__icontains=search)
            | Q(adopter__first_name__icontains=search)
            | Q(adopter__last_name__icontains=search)
            | Q(adopter__email__icontains=search)
        )

    return queryset.order_by("-request_date", "-id")


def get_request(request_id, user=None):
    """
    Fetch one adoption request.

    Raises:
        NotFoundError: If it does not exist
        PermissionDeniedError: If user is an adopter who does not own it
    """
    try:
        adoption = AdoptionRequest.objects.select_related(
            "animal", "adopter", "processed_by"
        ).get(id=request_id)
    except (AdoptionRequest.DoesNotExist, ValueError, TypeError):
        raise NotFoundError(f"Adoption request {request_id} does not exist")

    if user is not None and user.role == ADOPTER and adoption.adopter_id != user.id:
        raise PermissionDeniedError("You can only view your own adoption requests")
    return adoption


def get_statistics(now=None):
    """
    Per-status counts plus this month's activity.

    Monthly figures use updated_at, the time of the last status change.
    """
    now = timezone.localtime(now or timezone.now())
    this_month = Q(updated_at__year=now.year, updated_at__month=now.month)

    status_counts = {
        choice.name.lower(): Count("id", filter=Q(status=choice.value))
        for choice in AdoptionStatus
    }
    totals = AdoptionRequest.objects.aggregate(
        total=Count("id"),
        this_month_total=Count("id", filter=this_month),
        completed_this_month=Count(
            "id", filter=this_month & Q(status=AdoptionStatus.COMPLETED)
        ),
        **status_counts,
    )

    return {
        "total": totals["total"],
        "by_status": {
            choice.value: totals[choice.name.lower()] for choice in AdoptionStatus
        },
        "this_month_total": totals["this_month_total"],
        "completed_this_month": totals["completed_this_month"],
    }


def animal_history(animal_id):
    """All requests for an animal, newest first."""
    get_animal(animal_id)
    return (
        AdoptionRequest.objects.select_related("animal", "adopter", "processed_by")
        .filter(animal_id=animal_id)
        .order_by("-request_date", "-id")
    )


def adopter_history(adopter_id):
    """All requests made by an adopter, newest first."""
    _get_user(adopter_id)
    return (
        AdoptionRequest.objects.select_related("animal", "adopter", "processed_by")
        .filter(adopter_id=adopter_id)
        .order_by("-request_date", "-id")
    )
