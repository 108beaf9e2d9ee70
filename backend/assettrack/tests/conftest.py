import os
import tempfile

import pytest

_DB_DIR = tempfile.mkdtemp(prefix="assettrack-tests-")
os.environ["DB_URI"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["SEED_SAMPLE_DATA"] = "false"

from assettrack.db.session import Base, SessionLocal, init_db  # noqa: E402
from assettrack.schemas.common import Device  # noqa: E402


@pytest.fixture(autouse=True)
def clean_db():
    init_db()
    db = SessionLocal()
    try:
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(table.delete())
        db.commit()
    finally:
        db.close()
    yield


@pytest.fixture
def make_device():
    counter = {"id": 0}

    def _make(type="Laptop", assigned_to="", status="Active", serial=None, date_assigned=None, notes=None):
        counter["id"] += 1
        return Device(
            id=counter["id"],
            type=type,
            status=status,
            serial_number=serial or f"SN-{counter['id']:03d}",
            assigned_to=assigned_to,
            date_assigned=date_assigned,
            notes=notes,
        )

    return _make
