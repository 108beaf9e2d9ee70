from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List, Literal
from datetime import datetime


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class Device(CamelModel):
    id: int
    type: str
    status: str
    serial_number: str
    model_number: Optional[str] = None
    department: Optional[str] = None
    warranty: Optional[str] = None
    notes: Optional[str] = None
    assigned_to: str = ""
    date_assigned: Optional[str] = None


class DeviceCreate(CamelModel):
    type: str = ""
    status: str = ""
    serial_number: str = ""
    model_number: Optional[str] = None
    department: Optional[str] = None
    warranty: Optional[str] = None
    notes: Optional[str] = None
    assigned_to: str = ""
    date_assigned: Optional[str] = None


class DeviceUpdate(CamelModel):
    type: Optional[str] = None
    status: Optional[str] = None
    serial_number: Optional[str] = None
    model_number: Optional[str] = None
    department: Optional[str] = None
    warranty: Optional[str] = None
    notes: Optional[str] = None
    assigned_to: Optional[str] = None
    date_assigned: Optional[str] = None


class ImportResultOut(CamelModel):
    succeeded: int
    failed: int
    errors: List[str]
    message: str


class CategoryOut(CamelModel):
    type: str
    count: int
    icon: str
    color: str


class StatusCountOut(CamelModel):
    status: str
    count: int


class EmployeeDevicesOut(CamelModel):
    employee: str
    device_count: int
    devices: List[Device]


class EmployeeAssignmentOut(EmployeeDevicesOut):
    active_devices: int
    available_devices: int
    maintenance_devices: int


class DashboardOut(CamelModel):
    total_devices: int
    active_devices: int
    employees_with_devices: int
    maintenance_required: int
    employees_with_multiple_devices: int
    status_counts: List[StatusCountOut]
    categories: List[CategoryOut]
    top_multi_device_employees: List[EmployeeDevicesOut]
    recent_assignments: List[Device]


class ReportSummaryOut(CamelModel):
    generated_on: str
    total_devices: int
    active_devices: int
    available_devices: int
    maintenance_devices: int
    employee_assignments: List[EmployeeAssignmentOut]


IncidentStatus = Literal["Open", "In Progress", "Resolved", "Closed"]
ProjectStatus = Literal["Planned", "In Progress", "Completed"]
ActivityStatus = Literal["Pending", "In Progress", "Completed"]
Priority = Literal["High", "Medium", "Low"]


def _reject_null(value):
    if value is None:
        raise ValueError("may not be null")
    return value


class IncidentCreate(CamelModel):
    title: str = Field(min_length=1)
    description: str = ""
    status: IncidentStatus = "Open"
    date: Optional[str] = None


class IncidentUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    status: Optional[IncidentStatus] = None
    date: Optional[str] = None

    not_null = field_validator("title", "description", "status", "date")(_reject_null)


class IncidentOut(CamelModel):
    id: int
    title: str
    description: str
    status: str
    date: str
    created_at: datetime


class ProjectCreate(CamelModel):
    name: str = Field(min_length=1)
    description: str = ""
    status: ProjectStatus = "Planned"
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class ProjectUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    status: Optional[ProjectStatus] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None

    not_null = field_validator("name", "description", "status")(_reject_null)


class ProjectOut(CamelModel):
    id: int
    name: str
    description: str
    status: str
    start_date: Optional[str]
    end_date: Optional[str]
    created_at: datetime


class ActivityCreate(CamelModel):
    title: str = Field(min_length=1)
    description: str = ""
    status: ActivityStatus = "Pending"
    priority: Priority = "Medium"
    due_date: Optional[str] = None
    assigned_by: Optional[str] = None
    assigned_to: Optional[str] = None


class ActivityUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    status: Optional[ActivityStatus] = None
    priority: Optional[Priority] = None
    due_date: Optional[str] = None
    assigned_by: Optional[str] = None
    assigned_to: Optional[str] = None

    not_null = field_validator("title", "description", "status", "priority")(_reject_null)


class ActivityOut(CamelModel):
    id: int
    title: str
    description: str
    status: str
    priority: str
    due_date: Optional[str]
    assigned_by: Optional[str]
    assigned_to: Optional[str]
    created_at: datetime


class StatusColumnOut(CamelModel):
    status: str
    items: List[ActivityOut]
