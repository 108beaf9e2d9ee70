"""Derived groupings over the current device list.

Nothing here is persisted; every view is recomputed from the list it is given.
Iteration order is first-occurrence order throughout.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

from ..schemas.common import Device
from .normalizer import (
    DEVICE_STATUSES,
    TYPE_ALIASES,
    TYPES_BY_LABEL,
    DeviceTypeInfo,
    normalize_type,
    type_metadata,
)


@dataclass
class CategorySummary:
    type: str
    count: int
    icon: str
    color: str


def aggregate_by_category(
    devices: Iterable[Device],
    aliases: Mapping[str, DeviceTypeInfo] = TYPE_ALIASES,
    types: Mapping[str, DeviceTypeInfo] = TYPES_BY_LABEL,
) -> "OrderedDict[str, CategorySummary]":
    groups: "OrderedDict[str, CategorySummary]" = OrderedDict()
    for device in devices:
        label = normalize_type(device.type, aliases)
        group = groups.get(label)
        if group is None:
            meta = type_metadata(label, types)
            group = groups[label] = CategorySummary(label, 0, meta["icon"], meta["color"])
        group.count += 1
    return groups


def status_counts(devices: Iterable[Device]) -> "OrderedDict[str, int]":
    counts = OrderedDict((status, 0) for status in DEVICE_STATUSES)
    for device in devices:
        if device.status in counts:
            counts[device.status] += 1
    return counts


class EmployeeAggregate:
    """Devices grouped by the exact ``assigned_to`` name.

    Names are compared as-is (case-sensitive); blank or whitespace-only names
    are left out entirely, there is no "unassigned" bucket.
    """

    def __init__(self, groups: "OrderedDict[str, list[Device]]"):
        self.groups = groups

    @classmethod
    def from_devices(cls, devices: Iterable[Device]) -> "EmployeeAggregate":
        groups: "OrderedDict[str, list[Device]]" = OrderedDict()
        for device in devices:
            name = device.assigned_to
            if not name or not name.strip():
                continue
            groups.setdefault(name, []).append(device)
        return cls(groups)

    @property
    def total_employees(self) -> int:
        return len(self.groups)

    @property
    def employees_with_multiple_devices(self) -> int:
        return sum(1 for devices in self.groups.values() if len(devices) > 1)

    def top_multi_device_employees(self, limit: int) -> list[tuple[str, list[Device]]]:
        # First-seen order, not ranked by count.
        multi = [(name, devices) for name, devices in self.groups.items() if len(devices) > 1]
        return multi[: max(limit, 0)]

    def employee_list(self) -> list[str]:
        return sorted(self.groups)

    def devices_for(self, name: str) -> list[Device]:
        return list(self.groups.get(name, []))

    def assignments(self) -> list[dict]:
        rows = []
        for name, devices in self.groups.items():
            rows.append(
                {
                    "employee": name,
                    "devices": devices,
                    "device_count": len(devices),
                    "active_devices": sum(1 for d in devices if d.status == "Active"),
                    "available_devices": sum(1 for d in devices if d.status == "Available"),
                    "maintenance_devices": sum(1 for d in devices if d.status == "Maintenance"),
                }
            )
        return rows


def recent_assignments(devices: Sequence[Device], limit: int) -> list[Device]:
    dated = [d for d in devices if d.date_assigned]
    dated.sort(key=lambda d: d.date_assigned, reverse=True)
    return dated[:limit]
