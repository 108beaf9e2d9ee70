from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from ..db.session import get_db
from ..models.incident import Incident
from ..schemas.common import IncidentCreate, IncidentOut, IncidentUpdate, StatusCountOut
from ..services.reports import CONTENT_TYPES, Report, render
from ..services.trackers import INCIDENT_STATUSES, count_by_status

router = APIRouter(prefix="/incidents", tags=["incidents"])


def _filtered(db: Session, status: str, on: Optional[str], q: str) -> list[Incident]:
    query = db.query(Incident)
    if status != "all":
        query = query.filter(Incident.status == status)
    if on:
        query = query.filter(Incident.date == on)
    items = query.order_by(Incident.id.desc()).all()
    term = q.strip().lower()
    if term:
        items = [i for i in items if term in i.title.lower() or term in (i.description or "").lower()]
    return items


def _get_or_404(db: Session, incident_id: int) -> Incident:
    incident = db.get(Incident, incident_id)
    if incident is None:
        raise HTTPException(status_code=404, detail="Incident not found")
    return incident


@router.get("/", response_model=List[IncidentOut])
def list_incidents(status: str = "all", on: Optional[str] = Query(None, alias="date"), q: str = "", db: Session = Depends(get_db)):
    return _filtered(db, status, on, q)


@router.post("/", response_model=IncidentOut, status_code=201)
def create_incident(payload: IncidentCreate, db: Session = Depends(get_db)):
    data = payload.model_dump()
    data["date"] = data["date"] or date.today().isoformat()
    incident = Incident(**data)
    db.add(incident); db.commit(); db.refresh(incident)
    return incident


@router.get("/analytics", response_model=List[StatusCountOut])
def incident_analytics(db: Session = Depends(get_db)):
    counts = count_by_status((i.status for i in db.query(Incident).all()), INCIDENT_STATUSES)
    return [StatusCountOut(status=s, count=c) for s, c in counts.items()]


@router.get("/export.{fmt}")
def export_incidents(fmt: str, status: str = "all", on: Optional[str] = Query(None, alias="date"), q: str = "", db: Session = Depends(get_db)):
    items = _filtered(db, status, on, q)
    report = Report(
        title="Incident Management Report",
        headers=["Title", "Description", "Status", "Date"],
        rows=[[i.title, i.description, i.status, i.date] for i in items],
        summary={"Total Incidents": len(items)},
        sheet_name="Incidents",
    )
    body = render(report, fmt, subtitle="Incident Management Report")
    return Response(
        content=body,
        media_type=CONTENT_TYPES[fmt],
        headers={"Content-Disposition": f"attachment; filename=incidents-{report.generated_on.isoformat()}.{fmt}"},
    )


@router.patch("/{incident_id}", response_model=IncidentOut)
def update_incident(incident_id: int, payload: IncidentUpdate, db: Session = Depends(get_db)):
    incident = _get_or_404(db, incident_id)
    for key, value in payload.model_dump(exclude_unset=True).items():
        setattr(incident, key, value)
    db.commit(); db.refresh(incident)
    return incident


@router.delete("/{incident_id}", status_code=204)
def delete_incident(incident_id: int, db: Session = Depends(get_db)):
    incident = _get_or_404(db, incident_id)
    db.delete(incident); db.commit()
