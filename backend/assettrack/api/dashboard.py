from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.config import settings
from ..db.session import get_db
from ..schemas.common import CategoryOut, DashboardOut, EmployeeDevicesOut, StatusCountOut
from ..services.aggregates import EmployeeAggregate, aggregate_by_category, recent_assignments, status_counts
from ..services.store import DeviceStore

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def _build_dashboard(db: Session, top_limit: int) -> DashboardOut:
    devices = DeviceStore(db).list()
    counts = status_counts(devices)
    employees = EmployeeAggregate.from_devices(devices)
    categories = aggregate_by_category(devices)
    return DashboardOut(
        total_devices=len(devices),
        active_devices=counts["Active"],
        employees_with_devices=employees.total_employees,
        maintenance_required=counts["Maintenance"],
        employees_with_multiple_devices=employees.employees_with_multiple_devices,
        status_counts=[StatusCountOut(status=s, count=c) for s, c in counts.items()],
        categories=[
            CategoryOut(type=c.type, count=c.count, icon=c.icon, color=c.color) for c in categories.values()
        ],
        top_multi_device_employees=[
            EmployeeDevicesOut(employee=name, device_count=len(items), devices=items)
            for name, items in employees.top_multi_device_employees(top_limit)
        ],
        recent_assignments=recent_assignments(devices, settings.RECENT_ASSIGNMENTS_LIMIT),
    )


@router.get("/", response_model=DashboardOut)
def get_dashboard(limit: int | None = None, db: Session = Depends(get_db)):
    top_limit = settings.TOP_EMPLOYEES_LIMIT if limit is None else max(0, limit)
    return _build_dashboard(db, top_limit)


@router.get("/categories", response_model=list[CategoryOut])
def get_categories(db: Session = Depends(get_db)):
    categories = aggregate_by_category(DeviceStore(db).list())
    return [CategoryOut(type=c.type, count=c.count, icon=c.icon, color=c.color) for c in categories.values()]
