"""
Store-level tests: run the CRUD classes directly against the test database.

Covers the read-returns-None convention, rows-affected checks on keyed
mutations, pre-flight reference checks and soft deletes.
"""
from datetime import datetime
from uuid import uuid4

import asyncio

import pytest

from app.core.exceptions import (
    ConflictError,
    NotFoundError,
    ReferentialIntegrityError,
)
from app.crud.base import transaction
from app.crud.car import car_crud
from app.crud.driver import driver_crud
from app.crud.engine import engine_crud
from app.crud.trip import trip_crud
from app.crud.user import user_crud
from app.models import Car, Engine
from app.schemas.car import CarRequest
from app.schemas.driver import DriverRequest
from app.schemas.engine import EngineRequest
from app.schemas.trip import TripRequest


def car_request(engine_id, **overrides) -> CarRequest:
    data = {
        "registration_number": "KAA001A",
        "name": "Civic",
        "year": "2020",
        "brand": "Honda",
        "fuel_type": "Petrol",
        "status": "Available",
        "engine": {"engine_id": str(engine_id)},
        "price": 15000.0,
    }
    data.update(overrides)
    return CarRequest(**data)


class TestEngineStore:

    def test_create_and_get(self, test_db):
        engine = engine_crud.create(
            test_db, obj_in=EngineRequest(displacement=2000, no_of_cylinders=6, car_range=500)
        )
        fetched = engine_crud.get_by_id(test_db, engine_id=engine.id)
        assert fetched.id == engine.id
        assert fetched.no_of_cylinders == 6

    def test_get_missing_returns_none(self, test_db):
        assert engine_crud.get_by_id(test_db, engine_id=uuid4()) is None

    def test_update_missing_raises_not_found(self, test_db, test_engine):
        with pytest.raises(NotFoundError):
            engine_crud.update_by_id(
                test_db,
                engine_id=uuid4(),
                obj_in=EngineRequest(displacement=1, no_of_cylinders=1, car_range=1),
            )
        # Existing rows untouched
        assert engine_crud.get_by_id(test_db, engine_id=test_engine.id).displacement == 1500

    def test_delete_returns_snapshot(self, test_db, test_engine):
        engine_id = test_engine.id
        deleted = engine_crud.remove(test_db, id=engine_id)
        assert deleted.id == engine_id
        assert deleted.displacement == 1500
        assert engine_crud.get_by_id(test_db, engine_id=engine_id) is None

    def test_delete_engine_in_use_is_rejected(self, test_db, test_car):
        with pytest.raises(ReferentialIntegrityError):
            engine_crud.remove(test_db, id=test_car.engine_id)
        assert test_db.query(Engine).count() == 1


class TestCarStore:

    def test_create_with_unknown_engine_writes_nothing(self, test_db):
        with pytest.raises(ReferentialIntegrityError):
            car_crud.create(test_db, obj_in=car_request(uuid4()), created_by="admin")
        assert test_db.query(Car).count() == 0

    def test_create_then_get_matches(self, test_db, test_engine):
        created = car_crud.create(test_db, obj_in=car_request(test_engine.id), created_by="admin")
        fetched = car_crud.get_by_id(test_db, car_id=created.id)

        assert fetched.registration_number == "KAA001A"
        assert fetched.year == 2020
        assert fetched.created_by == "admin"
        assert fetched.updated_by == "admin"
        assert fetched.engine.id == test_engine.id

    def test_generated_ids_are_unique(self, test_db, test_engine):
        first = car_crud.create(test_db, obj_in=car_request(test_engine.id), created_by="admin")
        second = car_crud.create(
            test_db,
            obj_in=car_request(test_engine.id, registration_number="KAA002A"),
            created_by="admin",
        )
        assert first.id != second.id

    def test_duplicate_registration_conflicts(self, test_db, test_car):
        with pytest.raises(ConflictError):
            car_crud.create(
                test_db, obj_in=car_request(test_car.engine_id), created_by="admin"
            )
        assert test_db.query(Car).count() == 1

    def test_filter_by_brand(self, test_db, test_car):
        car_crud.create(
            test_db,
            obj_in=car_request(test_car.engine_id, registration_number="KCC303C", brand="Toyota"),
            created_by="admin",
        )
        assert {c.brand for c in car_crud.get_all(test_db, brand="Honda")} == {"Honda"}
        assert len(car_crud.get_all(test_db)) == 2
        assert car_crud.get_all(test_db, brand="Volvo") == []

    def test_update_overwrites_fields(self, test_db, test_car):
        updated = car_crud.update_by_id(
            test_db,
            car_id=test_car.id,
            obj_in=car_request(test_car.engine_id, name="Accord", status="Maintenance", price=9000.0),
            updated_by="mechanic",
        )
        assert updated.name == "Accord"
        assert updated.status == "Maintenance"
        assert updated.price == 9000.0
        assert updated.updated_by == "mechanic"

    def test_update_missing_car(self, test_db, test_engine):
        with pytest.raises(NotFoundError):
            car_crud.update_by_id(
                test_db, car_id=uuid4(), obj_in=car_request(test_engine.id), updated_by="admin"
            )

    def test_delete_then_get_returns_none(self, test_db, test_car):
        car_id = test_car.id
        snapshot = car_crud.remove(test_db, id=car_id)
        assert snapshot.registration_number == "KAA001A"
        assert car_crud.get_by_id(test_db, car_id=car_id) is None
        assert car_crud.remove(test_db, id=car_id) is None


class TestUserAndDriverStore:

    def test_set_active_is_idempotent(self, test_db, test_driver):
        first = driver_crud.set_active(test_db, driver_id=test_driver.id, active=True)
        second = driver_crud.set_active(test_db, driver_id=test_driver.id, active=True)
        assert first.active is True
        assert second.active is True

    def test_set_active_missing_row(self, test_db):
        with pytest.raises(NotFoundError):
            user_crud.set_active(test_db, user_id=uuid4(), active=False)

    def test_soft_deleted_user_hidden_from_reads(self, test_db, driver_user):
        user_id = driver_user.id
        snapshot = user_crud.soft_delete(test_db, user_id=user_id, deleted_at=datetime(2024, 1, 1))

        assert snapshot.deleted_at is None
        assert user_crud.get_by_id(test_db, user_id=user_id) is None
        assert user_crud.get_by_username(test_db, username="jdoe") is None
        assert user_crud.get_by_id(test_db, user_id=user_id, include_deleted=True).deleted_at is not None
        # Second soft delete finds nothing
        assert user_crud.soft_delete(test_db, user_id=user_id, deleted_at=datetime(2024, 1, 2)) is None

    def test_driver_for_unknown_user(self, test_db):
        with pytest.raises(ReferentialIntegrityError):
            driver_crud.create(test_db, obj_in=DriverRequest(user_id=uuid4()), created_by="admin")

    def test_driver_joined_with_user(self, test_db, test_driver):
        driver = driver_crud.get_by_id(test_db, driver_id=test_driver.id)
        assert driver.user.username == "jdoe"

    def test_soft_deleted_driver_hidden(self, test_db, test_driver):
        driver_id = test_driver.id
        driver_crud.soft_delete(test_db, driver_id=driver_id, deleted_at=datetime(2024, 1, 1))
        assert driver_crud.get_by_id(test_db, driver_id=driver_id) is None
        assert driver_crud.get_all(test_db) == []


class TestTripStore:

    def test_unknown_car_rejected_by_foreign_key(self, test_db, test_driver):
        trip_req = TripRequest(
            description="Ghost car",
            driver_id=test_driver.id,
            car_id=uuid4(),
            start_location="A",
            end_location="B",
            start_time=datetime(2024, 1, 1, 9, 0),
            distance_km=1.0,
            fuel_consumed_liters=0.2,
            status="Draft",
        )
        with pytest.raises(ReferentialIntegrityError):
            trip_crud.create(test_db, obj_in=trip_req, created_by="admin")
        assert trip_crud.get_all(test_db) == []

    def test_status_transitions_unconstrained(self, test_db, test_trip):
        assert trip_crud.update_status(
            test_db, trip_id=test_trip.id, status="Completed", updated_by="admin"
        ).status == "Completed"
        assert trip_crud.update_status(
            test_db, trip_id=test_trip.id, status="Draft", updated_by="admin"
        ).status == "Draft"

    def test_list_by_car_and_driver(self, test_db, test_trip):
        assert [t.id for t in trip_crud.get_by_car(test_db, car_id=test_trip.car_id)] == [test_trip.id]
        assert [t.id for t in trip_crud.get_by_driver(test_db, driver_id=test_trip.driver_id)] == [test_trip.id]
        assert trip_crud.get_by_car(test_db, car_id=uuid4()) == []


class TestTransaction:

    @pytest.mark.parametrize("interrupt", [KeyboardInterrupt, asyncio.CancelledError])
    def test_interrupt_after_flush_rolls_back(self, test_db, interrupt):
        with pytest.raises(interrupt):
            with transaction(test_db) as db:
                db.add(Engine(displacement=1500, no_of_cylinders=4, car_range=600))
                db.flush()
                assert db.query(Engine).count() == 1
                raise interrupt()
        assert test_db.query(Engine).count() == 0
