from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..db.session import get_db
from ..models.project import Project
from ..schemas.common import ProjectCreate, ProjectOut, ProjectUpdate, StatusCountOut
from ..services.trackers import PROJECT_STATUSES, count_by_status

router = APIRouter(prefix="/projects", tags=["projects"])


def _get_or_404(db: Session, project_id: int) -> Project:
    project = db.get(Project, project_id)
    if project is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


@router.get("/", response_model=List[ProjectOut])
def list_projects(status: str = "all", db: Session = Depends(get_db)):
    query = db.query(Project)
    if status != "all":
        query = query.filter(Project.status == status)
    return query.order_by(Project.id.desc()).all()


@router.post("/", response_model=ProjectOut, status_code=201)
def create_project(payload: ProjectCreate, db: Session = Depends(get_db)):
    project = Project(**payload.model_dump())
    db.add(project); db.commit(); db.refresh(project)
    return project


@router.get("/analytics", response_model=List[StatusCountOut])
def project_analytics(db: Session = Depends(get_db)):
    counts = count_by_status((p.status for p in db.query(Project).all()), PROJECT_STATUSES)
    return [StatusCountOut(status=s, count=c) for s, c in counts.items()]


@router.patch("/{project_id}", response_model=ProjectOut)
def update_project(project_id: int, payload: ProjectUpdate, db: Session = Depends(get_db)):
    project = _get_or_404(db, project_id)
    for key, value in payload.model_dump(exclude_unset=True).items():
        setattr(project, key, value)
    db.commit(); db.refresh(project)
    return project


@router.delete("/{project_id}", status_code=204)
def delete_project(project_id: int, db: Session = Depends(get_db)):
    project = _get_or_404(db, project_id)
    db.delete(project); db.commit()
