from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, Text

from ..db.session import Base


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    status = Column(String, nullable=False, default="Planned")
    start_date = Column(String(10), nullable=True)
    end_date = Column(String(10), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
