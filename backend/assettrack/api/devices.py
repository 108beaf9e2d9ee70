import logging
from typing import List

from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.errors import ParseError
from ..db.session import get_db
from ..schemas.common import Device, DeviceCreate, DeviceUpdate, EmployeeDevicesOut, ImportResultOut
from ..services.aggregates import EmployeeAggregate
from ..services.devices import filter_devices, prepare_new_device, prepare_update, sort_devices
from ..services.importer import reconcile
from ..services.spreadsheet import read_rows
from ..services.store import DeviceStore

router = APIRouter(prefix="/devices", tags=["devices"])
logger = logging.getLogger(__name__)


@router.get("/", response_model=List[Device])
def list_devices(
    q: str = "",
    type: str = "all",
    status: str = "all",
    sort_by: str = "serialNumber",
    order: str = "asc",
    db: Session = Depends(get_db),
):
    devices = filter_devices(DeviceStore(db).list(), search=q, type_filter=type, status_filter=status)
    return sort_devices(devices, sort_by=sort_by, order=order)


@router.post("/", response_model=Device, status_code=201)
def create_device(payload: DeviceCreate, db: Session = Depends(get_db)):
    return DeviceStore(db).insert(prepare_new_device(payload))


@router.get("/employees", response_model=List[str])
def list_employees(db: Session = Depends(get_db)):
    return EmployeeAggregate.from_devices(DeviceStore(db).list()).employee_list()


@router.get("/employees/{name}", response_model=EmployeeDevicesOut)
def employee_devices(name: str, db: Session = Depends(get_db)):
    devices = EmployeeAggregate.from_devices(DeviceStore(db).list()).devices_for(name)
    return EmployeeDevicesOut(employee=name, device_count=len(devices), devices=devices)


@router.post("/import", response_model=ImportResultOut)
async def import_devices(file: UploadFile = File(...), db: Session = Depends(get_db)):
    content = await file.read()
    if len(content) > settings.MAX_IMPORT_BYTES:
        raise ParseError("The uploaded file is too large.")
    rows = read_rows(file.filename, content)
    logger.info("importing %s rows from %s", len(rows), file.filename)
    result = reconcile(rows, DeviceStore(db))
    return ImportResultOut(
        succeeded=result.succeeded, failed=result.failed, errors=result.errors, message=result.message
    )


@router.get("/{device_id}", response_model=Device)
def get_device(device_id: int, db: Session = Depends(get_db)):
    return DeviceStore(db).get(device_id)


@router.patch("/{device_id}", response_model=Device)
def update_device(device_id: int, payload: DeviceUpdate, db: Session = Depends(get_db)):
    store = DeviceStore(db)
    current = store.get(device_id)
    return store.update(device_id, prepare_update(payload, current_assignee=current.assigned_to))


@router.delete("/{device_id}", status_code=204)
def delete_device(device_id: int, db: Session = Depends(get_db)):
    DeviceStore(db).delete(device_id)
