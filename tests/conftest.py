"""
Pytest configuration and fixtures for testing.
"""
import os

# Settings are read at import time, so these must be in place before app imports
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database.session import Base, get_db
from main import app
from app.models import Car, Driver, Engine, Trip, User
from app.utils.auth import get_password_hash
from common_utils.auth.utils import create_access_token


# Test database URL - using in-memory SQLite for tests
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "correct-password"


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture(scope="function")
def test_db():
    """
    Create a fresh test database for each test function.
    """
    engine = create_engine(
        SQLALCHEMY_TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    # Create all tables
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def client(test_db):
    """
    Create a test client whose requests share the test database session.
    """
    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ==========================================
# Users & tokens
# ==========================================

@pytest.fixture(scope="function")
def admin_user(test_db):
    user = User(
        username=ADMIN_USERNAME,
        password=get_password_hash(ADMIN_PASSWORD),
        first_name="Fleet",
        last_name="Admin",
        email="admin@carzone.test",
        phone_number="0700000000",
        role="admin",
        active=True,
        created_by="system",
    )
    test_db.add(user)
    test_db.commit()
    test_db.refresh(user)
    return user


@pytest.fixture(scope="function")
def admin_token(admin_user):
    token, _ = create_access_token(admin_user.username)
    return token


@pytest.fixture(scope="function")
def auth_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture(scope="function")
def driver_user(test_db):
    user = User(
        username="jdoe",
        password=get_password_hash("driver-password"),
        first_name="John",
        last_name="Doe",
        role="driver",
        active=True,
        created_by=ADMIN_USERNAME,
    )
    test_db.add(user)
    test_db.commit()
    test_db.refresh(user)
    return user


# ==========================================
# Fleet fixtures
# ==========================================

@pytest.fixture(scope="function")
def test_engine(test_db):
    engine = Engine(displacement=1500, no_of_cylinders=4, car_range=600)
    test_db.add(engine)
    test_db.commit()
    test_db.refresh(engine)
    return engine


@pytest.fixture(scope="function")
def test_car(test_db, test_engine):
    car = Car(
        registration_number="KAA001A",
        name="Civic",
        year=2020,
        brand="Honda",
        fuel_type="Petrol",
        status="Available",
        price=15000.0,
        engine_id=test_engine.id,
        created_by=ADMIN_USERNAME,
        updated_by=ADMIN_USERNAME,
    )
    test_db.add(car)
    test_db.commit()
    test_db.refresh(car)
    return car


@pytest.fixture(scope="function")
def test_driver(test_db, driver_user):
    driver = Driver(
        user_id=driver_user.id,
        driver_license_number="DL-0001",
        license_expiry=datetime(2030, 1, 1),
        active=True,
        created_by=ADMIN_USERNAME,
    )
    test_db.add(driver)
    test_db.commit()
    test_db.refresh(driver)
    return driver


@pytest.fixture(scope="function")
def test_trip(test_db, test_car, test_driver):
    start = datetime(2024, 5, 1, 8, 0, 0)
    trip = Trip(
        description="Airport run",
        driver_id=test_driver.id,
        car_id=test_car.id,
        start_location="Nairobi CBD",
        end_location="JKIA",
        start_time=start,
        end_time=start + timedelta(hours=1),
        distance_km=18.5,
        fuel_consumed_liters=2.1,
        status="Scheduled",
        created_by=ADMIN_USERNAME,
        updated_by=ADMIN_USERNAME,
    )
    test_db.add(trip)
    test_db.commit()
    test_db.refresh(trip)
    return trip


@pytest.fixture(scope="function")
def car_payload(test_engine):
    """Common car request body for tests"""
    return {
        "registration_number": "KBB202B",
        "name": "Corolla",
        "year": "2019",
        "brand": "Toyota",
        "fuel_type": "Hybrid",
        "status": "Available",
        "engine": {"engine_id": str(test_engine.id)},
        "price": 12000.0,
    }


@pytest.fixture(scope="function")
def trip_payload(test_car, test_driver):
    return {
        "description": "Delivery to Mombasa road depot",
        "driver_id": str(test_driver.id),
        "car_id": str(test_car.id),
        "start_location": "Westlands",
        "end_location": "Mombasa Road",
        "start_time": "2024-06-01T09:00:00",
        "end_time": "2024-06-01T10:30:00",
        "distance_km": 22.0,
        "fuel_consumed_liters": 3.4,
        "status": "Scheduled",
    }
