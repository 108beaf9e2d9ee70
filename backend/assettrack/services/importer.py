"""Bulk device import: parse -> normalize -> validate -> commit, one row at a time.

Rows are committed independently. A row that fails validation or whose
insert fails is reported and skipped; rows already committed stay committed
and later rows are still processed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Mapping, Optional, Protocol, Sequence

from ..core.errors import AssetTrackError
from .normalizer import DEFAULT_STATUS, normalize_status, resolve_type

logger = logging.getLogger(__name__)

# Header row plus 1-based counting in the spreadsheet UI.
ROW_NUMBER_OFFSET = 2
STORE_FAILURE_MESSAGE = "Failed to add device"

FIELD_ALIASES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("type", ("type", "device type", "devicetype")),
    ("serial_number", ("serial number", "serialnumber", "serial", "seerial number")),
    ("model_number", ("model number", "modelnumber", "model")),
    ("assigned_to", ("assigned to", "assignedto", "assigned")),
    ("status", ("status",)),
    ("department", ("department",)),
    ("warranty", ("warranty",)),
    ("date_assigned", ("date assigned", "dateassigned", "date")),
    ("notes", ("notes", "note")),
)

REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("type", "Type"),
    ("serial_number", "Serial Number"),
)


class DeviceSink(Protocol):
    def insert(self, data: dict): ...


@dataclass
class ImportResult:
    succeeded: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        if self.succeeded == 0:
            return "No devices were successfully added. Please check your Excel file format."
        suffix = f" ({self.failed} failed)" if self.failed else ""
        return f"Successfully added {self.succeeded} devices{suffix}"


def _clean(value) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def resolve_fields(row: Mapping[str, object]) -> dict[str, Optional[str]]:
    """Pick each canonical field from the first matching column alias."""
    columns = {str(key).strip().lower(): value for key, value in row.items()}
    resolved: dict[str, Optional[str]] = {}
    for name, aliases in FIELD_ALIASES:
        value = None
        for alias in aliases:
            value = _clean(columns.get(alias))
            if value is not None:
                break
        resolved[name] = value
    return resolved


def normalize_row(fields: Mapping[str, Optional[str]], today: date) -> dict:
    return {
        "type": resolve_type(fields["type"]),
        "serial_number": fields["serial_number"],
        "model_number": fields["model_number"] or "",
        "assigned_to": fields["assigned_to"] or "",
        "status": normalize_status(fields["status"] or DEFAULT_STATUS),
        "department": fields["department"] or "",
        "warranty": fields["warranty"] or "",
        # Unlike manual entry, a missing date means "today" even when unassigned.
        "date_assigned": fields["date_assigned"] or today.isoformat(),
        "notes": fields["notes"] or "",
    }


def missing_fields(data: Mapping[str, Optional[str]]) -> list[str]:
    return [label for name, label in REQUIRED_FIELDS if not data.get(name)]


def reconcile(
    rows: Sequence[Mapping[str, object]],
    store: DeviceSink,
    today: Optional[date] = None,
    on_progress: Optional[Callable[[int, int], None]] = None,
) -> ImportResult:
    today = today or date.today()
    result = ImportResult()
    total = len(rows)
    for index, row in enumerate(rows):
        row_number = index + ROW_NUMBER_OFFSET
        data = normalize_row(resolve_fields(row), today)
        missing = missing_fields(data)
        if missing:
            message = f"Row {row_number}: Missing required fields: {', '.join(missing)}"
            logger.warning("import rejected %s", message)
            result.failed += 1
            result.errors.append(message)
        else:
            try:
                store.insert(data)
            except Exception as exc:
                message = exc.message if isinstance(exc, AssetTrackError) else STORE_FAILURE_MESSAGE
                logger.warning("import row %s failed: %s", row_number, exc)
                result.failed += 1
                result.errors.append(f"Row {row_number}: {message}")
            else:
                result.succeeded += 1
        if on_progress is not None:
            on_progress(index + 1, total)
    logger.info("import finished succeeded=%s failed=%s", result.succeeded, result.failed)
    return result
