# Import all CRUD modules for easier access
from app.crud.engine import engine_crud
from app.crud.car import car_crud
from app.crud.user import user_crud
from app.crud.driver import driver_crud
from app.crud.trip import trip_crud
