"""SQLAlchemy-backed device store and the core <-> wire field mapping."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.errors import ExternalStoreError, NotFoundError
from ..models.device import Device as DeviceRecord
from ..schemas.common import Device

logger = logging.getLogger(__name__)

# core field -> wire column
WIRE_FIELDS = {
    "type": "type",
    "serial_number": "serial_number",
    "model_number": "model_number",
    "department": "department",
    "warranty": "warranty",
    "notes": "notes",
    "assigned_to": "assigned_to",
    "status": "status",
    "date_assigned": "date_assigned",
}


def device_from_record(record: DeviceRecord) -> Device:
    return Device(
        id=record.id,
        type=record.type,
        status=record.status,
        serial_number=record.serial_number,
        model_number=record.model_number,
        department=record.department,
        warranty=record.warranty,
        notes=record.notes,
        assigned_to=record.assigned_to or "",
        date_assigned=record.date_assigned,
    )


def record_values(partial: dict) -> dict:
    """Wire column values for the core fields present in ``partial``."""
    values = {}
    for field, column in WIRE_FIELDS.items():
        if field not in partial:
            continue
        value = partial[field]
        if field == "assigned_to":
            value = value.strip() if value and value.strip() else None
        values[column] = value
    return values


class DeviceStore:
    def __init__(self, db: Session):
        self.db = db

    def _fail(self, action: str, exc: Exception):
        self.db.rollback()
        logger.error("device store %s failed: %s", action, exc)
        raise ExternalStoreError(f"Failed to {action} device") from exc

    def _get_record(self, device_id: int) -> DeviceRecord:
        record = self.db.get(DeviceRecord, device_id)
        if record is None:
            raise NotFoundError("Device not found")
        return record

    def list(self) -> list[Device]:
        try:
            records = self.db.query(DeviceRecord).order_by(DeviceRecord.id).all()
        except SQLAlchemyError as exc:
            self._fail("list", exc)
        return [device_from_record(r) for r in records]

    def get(self, device_id: int) -> Device:
        try:
            return device_from_record(self._get_record(device_id))
        except SQLAlchemyError as exc:
            self._fail("load", exc)

    def insert(self, data: dict) -> Device:
        record = DeviceRecord(**record_values(data))
        try:
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError as exc:
            self._fail("add", exc)
        logger.info("device added id=%s serial=%s", record.id, record.serial_number)
        return device_from_record(record)

    def update(self, device_id: int, partial: dict) -> Device:
        try:
            record = self._get_record(device_id)
            for column, value in record_values(partial).items():
                setattr(record, column, value)
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError as exc:
            self._fail("update", exc)
        logger.info("device updated id=%s fields=%s", device_id, sorted(partial))
        return device_from_record(record)

    def delete(self, device_id: int) -> None:
        try:
            record = self._get_record(device_id)
            self.db.delete(record)
            self.db.commit()
        except SQLAlchemyError as exc:
            self._fail("delete", exc)
        logger.info("device deleted id=%s", device_id)
