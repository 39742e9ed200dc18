"""
Domain validation for request payloads.

These functions are pure: they inspect a request schema and raise
``ValidationError`` on the first rule it breaks. Services call them before
touching the store, so a rejected request never reaches the database.
"""
from datetime import date, datetime
from uuid import UUID

from app.core.exceptions import InvalidArgumentError, ValidationError
from app.models.car import CarStatusEnum, FuelTypeEnum
from app.models.trip import TripStatusEnum
from app.schemas.car import CarRequest, EngineRef
from app.schemas.engine import EngineRequest
from app.schemas.trip import TripRequest

NIL_UUID = UUID(int=0)
FIRST_CAR_YEAR = 1886

FUEL_TYPES = [fuel.value for fuel in FuelTypeEnum]
# "InUse" is accepted as an alternate spelling of "In Use"
CAR_STATUSES = [car_status.value for car_status in CarStatusEnum] + ["InUse"]
TRIP_STATUSES = [trip_status.value for trip_status in TripStatusEnum]


def is_nil(value) -> bool:
    return value is None or value == NIL_UUID


# ---------- CAR ----------
def validate_car_request(car_req: CarRequest) -> None:
    _require(car_req.registration_number, "registration number is required")
    _require(car_req.name, "name is required")
    validate_year(car_req.year)
    _require(car_req.brand, "brand is required")
    validate_fuel_type(car_req.fuel_type)
    validate_car_status(car_req.status)
    validate_engine_ref(car_req.engine)
    validate_price(car_req.price)


def validate_year(year) -> int:
    raw = str(year).strip() if year is not None else ""
    if not raw:
        raise ValidationError("year is required", {"field": "year"})
    try:
        year_int = int(raw)
    except ValueError:
        raise ValidationError("year must be a valid number", {"field": "year", "value": raw})

    current_year = date.today().year
    if year_int < FIRST_CAR_YEAR or year_int > current_year:
        raise ValidationError(
            f"year must be between {FIRST_CAR_YEAR} and {current_year}",
            {"field": "year", "value": year_int},
        )
    return year_int


def validate_fuel_type(fuel_type: str) -> None:
    if fuel_type not in FUEL_TYPES:
        raise ValidationError(
            "fuel type must be one of: Petrol, Diesel, Electric, or Hybrid",
            {"field": "fuel_type", "value": fuel_type},
        )


def validate_car_status(car_status: str) -> None:
    if car_status not in CAR_STATUSES:
        raise ValidationError(
            "status type must be one of: Available, In Use, Maintenance, or Decommissioned",
            {"field": "status", "value": car_status},
        )


def validate_engine_ref(engine: EngineRef) -> None:
    if engine is None or is_nil(engine.engine_id):
        raise ValidationError("engine id is required", {"field": "engine.engine_id"})
    # Specs are optional on a reference, but when sent they must be positive
    if engine.displacement is not None:
        validate_displacement(engine.displacement)
    if engine.no_of_cylinders is not None:
        validate_no_of_cylinders(engine.no_of_cylinders)
    if engine.car_range is not None:
        validate_car_range(engine.car_range)


def validate_price(price: float) -> None:
    if price is None or price <= 0:
        raise ValidationError("price must be greater than 0", {"field": "price"})


# ---------- ENGINE ----------
def validate_engine_request(engine_req: EngineRequest) -> None:
    validate_displacement(engine_req.displacement)
    validate_no_of_cylinders(engine_req.no_of_cylinders)
    validate_car_range(engine_req.car_range)


def validate_displacement(displacement: int) -> None:
    if displacement <= 0:
        raise ValidationError("displacement must be greater than 0", {"field": "displacement"})


def validate_no_of_cylinders(no_of_cylinders: int) -> None:
    if no_of_cylinders <= 0:
        raise ValidationError("number of cylinders must be greater than 0", {"field": "no_of_cylinders"})


def validate_car_range(car_range: int) -> None:
    if car_range <= 0:
        raise ValidationError("car range must be greater than 0", {"field": "car_range"})


# ---------- TRIP ----------
def validate_trip_request(trip_req: TripRequest) -> None:
    """
    Check a full trip payload.

    Distance and fuel are only rejected when exactly zero; negative values
    pass. Status-only updates skip this function entirely.
    """
    _require(trip_req.description, "description is required")
    if is_nil(trip_req.driver_id):
        raise ValidationError("driver id is required", {"field": "driver_id"})
    if is_nil(trip_req.car_id):
        raise ValidationError("car id is required", {"field": "car_id"})
    _require(trip_req.start_location, "start location is required")
    _require(trip_req.end_location, "end location is required")
    if trip_req.start_time is None or trip_req.start_time.replace(tzinfo=None) == datetime.min:
        raise ValidationError("start time is required", {"field": "start_time"})
    if trip_req.distance_km == 0:
        raise ValidationError("distance is required", {"field": "distance_km"})
    if trip_req.fuel_consumed_liters == 0:
        raise ValidationError("fuel consumed is required", {"field": "fuel_consumed_liters"})
    validate_trip_status(trip_req.status)


def validate_trip_status(trip_status: str) -> None:
    if trip_status not in TRIP_STATUSES:
        raise ValidationError(
            "status type must be one of: Completed, Scheduled, Ongoing, Cancelled, Draft",
            {"field": "status", "value": trip_status},
        )


def _require(value: str, message: str) -> None:
    if not value or not value.strip():
        raise ValidationError(message)


# ---------- IDENTIFIERS ----------
def parse_id(raw, field: str = "id") -> UUID:
    """Parse a path identifier, raising InvalidArgumentError when malformed"""
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw).strip())
    except (ValueError, AttributeError):
        raise InvalidArgumentError(f"invalid {field}", {"field": field, "value": raw})
