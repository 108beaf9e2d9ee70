from datetime import date

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from ..db.session import get_db
from ..schemas.common import EmployeeAssignmentOut, ReportSummaryOut
from ..services.aggregates import EmployeeAggregate, status_counts
from ..services.reports import CONTENT_TYPES, build_device_report, render
from ..services.store import DeviceStore

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/summary", response_model=ReportSummaryOut)
def report_summary(db: Session = Depends(get_db)):
    devices = DeviceStore(db).list()
    counts = status_counts(devices)
    return ReportSummaryOut(
        generated_on=date.today().isoformat(),
        total_devices=len(devices),
        active_devices=counts["Active"],
        available_devices=counts["Available"],
        maintenance_devices=counts["Maintenance"],
        employee_assignments=[
            EmployeeAssignmentOut(**row) for row in EmployeeAggregate.from_devices(devices).assignments()
        ],
    )


@router.get("/{report_type}.{fmt}")
def export_report(report_type: str, fmt: str, db: Session = Depends(get_db)):
    devices = DeviceStore(db).list()
    report = build_device_report(report_type, devices, detail_sep=", " if fmt == "pdf" else "; ")
    body = render(report, fmt)
    filename = f"{report_type}-{report.generated_on.isoformat()}.{fmt}"
    return Response(
        content=body,
        media_type=CONTENT_TYPES[fmt],
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
