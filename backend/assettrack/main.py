from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from .core.config import settings
from .core.errors import AssetTrackError
from .core.logging import setup_logging
from .db.session import init_db, SessionLocal
from .api import devices, dashboard, reports, incidents, projects, activities
from .models.device import Device

logger = setup_logging()

app = FastAPI(title="Asset Tracker API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",")],
    allow_credentials=True, allow_methods=["*"], allow_headers=["*"],
)

app.include_router(devices.router)
app.include_router(dashboard.router)
app.include_router(reports.router)
app.include_router(incidents.router)
app.include_router(projects.router)
app.include_router(activities.router)

SAMPLE_DEVICES = [
    {"type": "Computer", "serial_number": "COMP-001-2024", "model_number": "OptiPlex 7090", "assigned_to": "John Doe",
     "status": "Active", "date_assigned": "2024-01-15", "notes": "Main workstation - Dell OptiPlex 7090"},
    {"type": "Printer", "serial_number": "PRNT-002-2024", "model_number": "LaserJet Pro", "assigned_to": "Jane Smith",
     "status": "Active", "date_assigned": "2024-01-20", "notes": "Color laser printer - HP LaserJet Pro"},
    {"type": "Scanner", "serial_number": "SCAN-003-2024", "assigned_to": "John Doe",
     "status": "Active", "date_assigned": "2024-01-10", "notes": "Document scanner - Canon imageFORMULA"},
    {"type": "SIM Card", "serial_number": "SIM-004-2024", "assigned_to": "Sarah Wilson",
     "status": "Active", "date_assigned": "2024-01-25", "notes": "Company phone SIM - MTN Corporate"},
    {"type": "Office Phone", "serial_number": "PHONE-005-2024", "assigned_to": "John Doe",
     "status": "Maintenance", "date_assigned": "2024-01-12", "notes": "Desk phone - needs new battery"},
    {"type": "Computer", "serial_number": "COMP-006-2024", "assigned_to": None,
     "status": "Available", "date_assigned": None, "notes": "Spare laptop - Lenovo ThinkPad"},
    {"type": "Printer", "serial_number": "PRNT-007-2024", "assigned_to": "Michael Brown",
     "status": "Active", "date_assigned": "2024-02-01", "notes": "Black and white printer - Brother HL-L2350DW"},
    {"type": "Scanner", "serial_number": "SCAN-008-2024", "assigned_to": None,
     "status": "Available", "date_assigned": None, "notes": "Portable scanner - Epson WorkForce"},
]


@app.exception_handler(AssetTrackError)
async def asset_track_error_handler(request: Request, exc: AssetTrackError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def seed_sample_devices():
    db = SessionLocal()
    try:
        if db.query(Device).first() is None:
            for device_data in SAMPLE_DEVICES:
                db.add(Device(**device_data))
            db.commit()
            logger.info("seeded %s sample devices", len(SAMPLE_DEVICES))
    finally:
        db.close()


@app.on_event("startup")
def on_startup():
    init_db()
    if settings.SEED_SAMPLE_DATA:
        seed_sample_devices()

@app.get("/health")
def health(): return {"ok": True}
