"""Availability checks for workspace bookings.

Two slots conflict iff ``s1 < e2 and s2 < e1`` on the same date; touching
endpoints do not conflict. Only pending and confirmed bookings hold their
slot. Inside ``transaction.atomic()`` the inspected rows are locked.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shared.domain.exceptions import ConflictError, ValidationError
from shared.infrastructure.locking import lock_queryset_if_possible

from .models import Booking

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from apps.workspaces.models import WorkshopEquipment, Workspace

CONFLICT_MESSAGE = "This workspace is already booked for the selected time."


def _validate_range(start_time, end_time) -> None:
    if start_time is None or end_time is None:
        raise ValidationError("Start and end time are required.")
    if start_time >= end_time:
        raise ValidationError("End time must be after start time.")


def conflicting_bookings(
    workspace: "Workspace | int",
    day,
    start_time,
    end_time,
    *,
    exclude_booking_id=None,
):
    """Pending/confirmed bookings of the workspace overlapping the slot."""

    _validate_range(start_time, end_time)
    workspace_id = getattr(workspace, "pk", workspace)

    bookings_qs = Booking.objects.filter(workspace_id=workspace_id).active().overlapping(
        day, start_time, end_time
    )
    if exclude_booking_id is not None:
        bookings_qs = bookings_qs.exclude(pk=exclude_booking_id)

    return lock_queryset_if_possible(bookings_qs)


def has_conflict(
    workspace: "Workspace | int",
    day,
    start_time,
    end_time,
    exclude_booking_id=None,
) -> bool:
    """True if any pending/confirmed booking of the workspace overlaps the slot."""

    return conflicting_bookings(
        workspace, day, start_time, end_time, exclude_booking_id=exclude_booking_id
    ).exists()


def ensure_workspace_is_available(
    workspace: "Workspace | int",
    day,
    start_time,
    end_time,
    *,
    exclude_booking_id=None,
) -> None:
    """Raise ConflictError if the workspace is busy for the slot."""

    if has_conflict(workspace, day, start_time, end_time, exclude_booking_id=exclude_booking_id):
        raise ConflictError(CONFLICT_MESSAGE)


def reserved_equipment_count(
    equipment: "WorkshopEquipment",
    day,
    start_time,
    end_time,
    *,
    exclude_booking_id=None,
) -> int:
    """Number of overlapping pending/confirmed bookings that reserve the equipment.

    Each booking reserves one unit of every item listed in ``equipment_used``.
    Counted in Python because JSON containment lookups are not portable.
    """

    rows = conflicting_bookings(
        equipment.workspace_id,
        day,
        start_time,
        end_time,
        exclude_booking_id=exclude_booking_id,
    ).values_list("equipment_used", flat=True)
    return sum(1 for used in rows if equipment.pk in {int(item) for item in used or []})


def available_equipment_quantity(
    equipment: "WorkshopEquipment",
    day,
    start_time,
    end_time,
    *,
    exclude_booking_id=None,
) -> int:
    reserved = reserved_equipment_count(
        equipment, day, start_time, end_time, exclude_booking_id=exclude_booking_id
    )
    return max(equipment.quantity_available - reserved, 0)


def ensure_equipment_is_available(
    workspace: "Workspace",
    equipment_ids,
    day,
    start_time,
    end_time,
    *,
    exclude_booking_id=None,
) -> list[int]:
    """Validate requested equipment ids and return them normalised.

    Raises ValidationError if the workspace is not a workshop, an id does
    not belong to the workspace, or an item has no free unit in the slot.
    """

    from apps.workspaces.models import WorkshopEquipment

    requested = sorted({int(item) for item in equipment_ids or []})
    if not requested:
        return []
    if not workspace.is_workshop:
        raise ValidationError("Equipment can only be reserved in a workshop.")

    items = {item.pk: item for item in WorkshopEquipment.objects.filter(workspace=workspace, pk__in=requested)}
    missing = [item_id for item_id in requested if item_id not in items]
    if missing:
        raise ValidationError(
            f"Equipment {', '.join(str(item_id) for item_id in missing)} "
            f"is not available at this workspace."
        )

    for item_id in requested:
        item = items[item_id]
        free = available_equipment_quantity(
            item, day, start_time, end_time, exclude_booking_id=exclude_booking_id
        )
        if free < 1:
            raise ValidationError(f"{item.name} is not available at the selected time.")
    return requested
