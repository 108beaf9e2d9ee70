from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, Text

from ..db.session import Base


class Device(Base):
    __tablename__ = "devices"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(String, nullable=False)
    serial_number = Column(String, nullable=False, index=True)
    model_number = Column(String, nullable=True)
    department = Column(String, nullable=True)
    warranty = Column(String, nullable=True)
    assigned_to = Column(String, nullable=True)
    status = Column(String, nullable=False, default="Available")
    date_assigned = Column(String(10), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
