# Imports for testing tools
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

# Import your application code
from villalux.main import app
from villalux.database import get_db, make_engine
from villalux.db_init import init_db


# --- Test Database Setup ---
@pytest.fixture(scope="function")
def engine(tmp_path):
    """A fresh, seeded SQLite database file per test."""
    test_engine = make_engine(f"sqlite:///{tmp_path / 'test_villalux.db'}")
    init_db(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine):
    """Provides a session bound to the per-test database."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()


# --- Keep the app away from the real database file ---
@pytest.fixture(scope="function", autouse=True)
def mock_app_init_db(mocker):
    """Stops the app lifespan from initialising villalux.db in the working directory."""
    return mocker.patch("villalux.main.init_db")


# --- API Test Client Fixture ---
@pytest.fixture(scope="function")
def client(db_session):
    """Provides a TestClient wired to the per-test database."""
    def override_get_db():
        try:
            yield db_session
        finally:
            db_session.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def booking_data():
    return {
        "bookingId": "VL-1001",
        "villa": "Azure Dreamhouse",
        "arrivalDate": "2025-07-01",
        "departureDate": "2025-07-08",
        "fullName": "Alex Doe",
        "email": "a@x.com",
        "guests": 2,
        "requests": "Late check-in",
    }
