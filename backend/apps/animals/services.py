"""
Animal services.

The adoption workflow changes an animal's status only through
set_animal_status, which must be called inside the caller's transaction.
"""

from shelter.exceptions import NotFoundError, ValidationError
from apps.animals.models import Animal, AnimalStatus


def get_animal(animal_id, for_update=False):
    """
    Fetch a non-deleted animal.

    Raises:
        NotFoundError: If the animal does not exist or is soft-deleted
    """
    queryset = Animal.objects.filter(is_deleted=False)
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=animal_id)
    except (Animal.DoesNotExist, ValueError, TypeError):
        raise NotFoundError(f"Animal {animal_id} does not exist")


def set_animal_status(animal, new_status):
    """
    Persist a new current_status for an animal.

    Returns:
        tuple: (previous_status, new_status)
    """
    if new_status not in AnimalStatus.values:
        raise ValidationError(f"Invalid animal status: {new_status}")

    previous = animal.current_status
    if previous == new_status:
        return previous, new_status

    animal.current_status = new_status
    animal.save(update_fields=["current_status", "updated_at"])
    return previous, new_status
