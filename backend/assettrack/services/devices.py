from datetime import date
from typing import Iterable, Optional

from ..core.errors import ValidationError
from ..schemas.common import Device, DeviceCreate, DeviceUpdate
from .normalizer import normalize_status, normalize_type

SORT_FIELDS = {
    "serialNumber": "serial_number",
    "type": "type",
    "assignedTo": "assigned_to",
    "status": "status",
    "dateAssigned": "date_assigned",
    "department": "department",
}


def prepare_new_device(payload: DeviceCreate, today: Optional[date] = None) -> dict:
    """Validate and normalize a manually entered device.

    Only the first missing field is reported, as a single blocking error.
    """
    if not payload.serial_number.strip():
        raise ValidationError("Serial number is required.")
    if not payload.type.strip():
        raise ValidationError("Device type is required.")
    if not payload.status.strip():
        raise ValidationError("Status is required.")
    data = payload.model_dump()
    data["serial_number"] = payload.serial_number.strip()
    data["type"] = normalize_type(payload.type)
    data["status"] = normalize_status(payload.status)
    data["assigned_to"] = payload.assigned_to.strip()
    if not data["assigned_to"]:
        data["date_assigned"] = None
    elif not payload.date_assigned:
        data["date_assigned"] = (today or date.today()).isoformat()
    return data


def prepare_update(payload: DeviceUpdate, current_assignee: str = "", today: Optional[date] = None) -> dict:
    partial = payload.model_dump(exclude_unset=True)
    if "serial_number" in partial and not (partial["serial_number"] or "").strip():
        raise ValidationError("Serial number is required.")
    if "type" in partial and not (partial["type"] or "").strip():
        raise ValidationError("Device type is required.")
    if "status" in partial and not (partial["status"] or "").strip():
        raise ValidationError("Status is required.")
    if "assigned_to" in partial:
        assignee = (partial["assigned_to"] or "").strip()
        partial["assigned_to"] = assignee
        if not assignee:
            partial["date_assigned"] = None
        elif not partial.get("date_assigned"):
            partial["date_assigned"] = (today or date.today()).isoformat()
    elif "date_assigned" in partial and not (current_assignee or "").strip():
        # An unassigned device never carries a date.
        partial["date_assigned"] = None
    return partial


def filter_devices(
    devices: Iterable[Device],
    search: str = "",
    type_filter: str = "all",
    status_filter: str = "all",
) -> list[Device]:
    term = (search or "").strip().lower()
    type_filter = (type_filter or "all").lower()
    status_filter = (status_filter or "all").lower()
    result = []
    for d in devices:
        if term and not any(
            term in (value or "").lower()
            for value in (d.serial_number, d.assigned_to, d.type, d.department)
        ):
            continue
        if type_filter != "all" and d.type.lower() != type_filter:
            continue
        if status_filter != "all" and d.status.lower() != status_filter:
            continue
        result.append(d)
    return result


def sort_devices(devices: list[Device], sort_by: str = "serialNumber", order: str = "asc") -> list[Device]:
    attr = SORT_FIELDS.get(sort_by)
    if attr is None:
        raise ValidationError(f"Cannot sort by {sort_by}")
    return sorted(devices, key=lambda d: getattr(d, attr) or "", reverse=order == "desc")
