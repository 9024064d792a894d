import os
import sys
from pathlib import Path
import pytest

# Ensure project root is on sys.path so tests can import 'rolltrack' package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Point the app at a throwaway sqlite file before the engine is created
os.environ["DATABASE_URL"] = f"sqlite:///{ROOT / 'test_rolltrack.db'}"

from rolltrack.db import Base, engine, reset_db


@pytest.fixture(autouse=True)
def clean_db():
    # Drop all and re-create so the test DB matches the current models exactly
    reset_db()
    yield
    Base.metadata.drop_all(bind=engine)
