from collections import OrderedDict
from typing import Iterable, Sequence

INCIDENT_STATUSES = ("Open", "In Progress", "Resolved", "Closed")
PROJECT_STATUSES = ("Planned", "In Progress", "Completed")
ACTIVITY_STATUSES = ("Pending", "In Progress", "Completed")


def count_by_status(statuses: Iterable[str], known: Sequence[str]) -> "OrderedDict[str, int]":
    counts = OrderedDict((s, 0) for s in known)
    for status in statuses:
        if status in counts:
            counts[status] += 1
    return counts


def group_by_status(items: Iterable, known: Sequence[str]) -> "OrderedDict[str, list]":
    columns = OrderedDict((s, []) for s in known)
    for item in items:
        if item.status in columns:
            columns[item.status].append(item)
    return columns
