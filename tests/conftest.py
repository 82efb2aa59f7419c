import os
import tempfile

# Must run before any api module is imported.
os.environ.setdefault("DB_DIR", tempfile.mkdtemp(prefix="mockexam-db-"))
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from api.app import app
from api.database import Base, SessionLocal, engine, get_db, init_db


@pytest.fixture()
def db_session():
    init_db(engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db_session):
    def _override_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
