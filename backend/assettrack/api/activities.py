from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..db.session import get_db
from ..models.activity import Activity
from ..schemas.common import ActivityCreate, ActivityOut, ActivityUpdate, StatusColumnOut
from ..services.trackers import ACTIVITY_STATUSES, group_by_status

router = APIRouter(prefix="/activities", tags=["activities"])


def _get_or_404(db: Session, activity_id: int) -> Activity:
    activity = db.get(Activity, activity_id)
    if activity is None:
        raise HTTPException(status_code=404, detail="Activity not found")
    return activity


@router.get("/", response_model=List[ActivityOut])
def list_activities(status: str = "all", priority: str = "all", db: Session = Depends(get_db)):
    query = db.query(Activity)
    if status != "all":
        query = query.filter(Activity.status == status)
    if priority != "all":
        query = query.filter(Activity.priority == priority)
    return query.order_by(Activity.id.desc()).all()


@router.get("/board", response_model=List[StatusColumnOut])
def activity_board(db: Session = Depends(get_db)):
    columns = group_by_status(db.query(Activity).order_by(Activity.id).all(), ACTIVITY_STATUSES)
    return [StatusColumnOut(status=s, items=items) for s, items in columns.items()]


@router.post("/", response_model=ActivityOut, status_code=201)
def create_activity(payload: ActivityCreate, db: Session = Depends(get_db)):
    activity = Activity(**payload.model_dump())
    db.add(activity); db.commit(); db.refresh(activity)
    return activity


@router.patch("/{activity_id}", response_model=ActivityOut)
def update_activity(activity_id: int, payload: ActivityUpdate, db: Session = Depends(get_db)):
    activity = _get_or_404(db, activity_id)
    for key, value in payload.model_dump(exclude_unset=True).items():
        setattr(activity, key, value)
    db.commit(); db.refresh(activity)
    return activity


@router.delete("/{activity_id}", status_code=204)
def delete_activity(activity_id: int, db: Session = Depends(get_db)):
    activity = _get_or_404(db, activity_id)
    db.delete(activity); db.commit()
