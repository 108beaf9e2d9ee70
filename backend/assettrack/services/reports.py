"""Report projections and their CSV / Excel / PDF renderings."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..core.config import settings
from ..core.errors import ValidationError
from ..schemas.common import Device
from .aggregates import EmployeeAggregate, status_counts

NOT_ASSIGNED = "Not assigned"

REPORT_TYPES = {
    "all-devices": "All Devices Report",
    "employee-assignments": "Employee Device Assignments Report",
}

DEVICE_HEADERS = ["Device Type", "Serial Number", "Assigned To", "Status", "Date Assigned", "Notes"]
ASSIGNMENT_HEADERS = ["Employee Name", "Total Devices", "Active", "Available", "Maintenance", "Device Details"]

CONTENT_TYPES = {
    "csv": "text/csv; charset=utf-8",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "pdf": "application/pdf",
}


@dataclass
class Report:
    title: str
    headers: list[str]
    rows: list[list]
    summary: dict = field(default_factory=dict)
    sheet_name: str = "Report"
    generated_on: date = field(default_factory=date.today)


def device_summary(devices: Sequence[Device]) -> dict:
    counts = status_counts(devices)
    return {
        "Total Devices": len(devices),
        "Active Devices": counts["Active"],
        "Available Devices": counts["Available"],
        "Maintenance Required": counts["Maintenance"],
    }


def device_detail(devices: Sequence[Device], sep: str) -> str:
    return sep.join(f"{d.type} ({d.serial_number})" for d in devices)


def build_device_report(report_type: str, devices: Sequence[Device], detail_sep: str = "; ") -> Report:
    title = REPORT_TYPES.get(report_type)
    if title is None:
        raise ValidationError(f"Unknown report type: {report_type}")
    if report_type == "employee-assignments":
        rows = [
            [
                a["employee"],
                a["device_count"],
                a["active_devices"],
                a["available_devices"],
                a["maintenance_devices"],
                device_detail(a["devices"], detail_sep),
            ]
            for a in EmployeeAggregate.from_devices(devices).assignments()
        ]
        headers = ASSIGNMENT_HEADERS
        sheet = "Assignments"
    else:
        rows = [
            [
                d.type,
                d.serial_number,
                d.assigned_to or NOT_ASSIGNED,
                d.status,
                d.date_assigned or NOT_ASSIGNED,
                d.notes or "",
            ]
            for d in devices
        ]
        headers = DEVICE_HEADERS
        sheet = "Devices"
    return Report(title=title, headers=list(headers), rows=rows, summary=device_summary(devices), sheet_name=sheet)


def to_csv(report: Report) -> bytes:
    buf = io.StringIO()
    buf.write(f"{settings.COMPANY_NAME}\n{settings.REPORT_SUBTITLE}\n\n")
    buf.write(f"Report Type: {report.title}\n")
    buf.write(f"Generated on: {report.generated_on.isoformat()}\n\n")
    pd.DataFrame(report.rows, columns=report.headers).to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def to_xlsx(report: Report) -> bytes:
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = report.sheet_name
    sheet.append(report.headers)
    header_fill = PatternFill("solid", fgColor="2563EB")
    for cell in sheet[1]:
        cell.font = Font(bold=True, color="FFFFFF")
        cell.fill = header_fill
    for row in report.rows:
        sheet.append(row)
    for idx, header in enumerate(report.headers, start=1):
        width = max([len(str(header))] + [len(str(r[idx - 1])) for r in report.rows if r[idx - 1] is not None])
        sheet.column_dimensions[sheet.cell(row=1, column=idx).column_letter].width = min(width + 2, 60)
    output = io.BytesIO()
    workbook.save(output)
    return output.getvalue()


def to_pdf(report: Report, subtitle: Optional[str] = None) -> bytes:
    output = io.BytesIO()
    pagesize = landscape(A4) if len(report.headers) > 5 else A4
    doc = SimpleDocTemplate(
        output,
        pagesize=pagesize,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
        title=f"{settings.COMPANY_NAME} - {report.title}",
    )
    styles = getSampleStyleSheet()
    cell_style = styles["BodyText"]
    cell_style.fontSize = 8
    cell_style.leading = 10

    story = [
        Paragraph(settings.COMPANY_NAME, styles["Title"]),
        Paragraph(subtitle or settings.REPORT_SUBTITLE, styles["Heading2"]),
        Paragraph(f"<b>{report.title}</b>", styles["Normal"]),
        Paragraph(f"<b>Generated on:</b> {report.generated_on.isoformat()}", styles["Normal"]),
    ]
    for label, value in report.summary.items():
        story.append(Paragraph(f"<b>{label}:</b> {value}", styles["Normal"]))
    story.append(Spacer(1, 6 * mm))

    data = [report.headers] + [
        [Paragraph(_escape(cell), cell_style) for cell in row] for row in report.rows
    ]
    table = Table(data, repeatRows=1)
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2563EB")),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, 0), 9),
                ("GRID", (0, 0), (-1, -1), 0.25, colors.black),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#F5F5F5")]),
            ]
        )
    )
    story.append(table)

    def _footer(canvas, doc_):
        canvas.saveState()
        canvas.setFont("Helvetica", 8)
        canvas.drawCentredString(
            pagesize[0] / 2, 8 * mm, f"Page {doc_.page} - Generated on {report.generated_on.isoformat()}"
        )
        canvas.restoreState()

    doc.build(story, onFirstPage=_footer, onLaterPages=_footer)
    return output.getvalue()


def _escape(value) -> str:
    text = "" if value is None else str(value)
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def render(report: Report, fmt: str, subtitle: Optional[str] = None) -> bytes:
    if fmt == "csv":
        return to_csv(report)
    if fmt == "xlsx":
        return to_xlsx(report)
    if fmt == "pdf":
        return to_pdf(report, subtitle)
    raise ValidationError(f"Unsupported export format: {fmt}")
