# Import all models here for easier access
from app.models.engine import Engine
from app.models.car import Car, CarStatusEnum, FuelTypeEnum
from app.models.user import User
from app.models.driver import Driver
from app.models.trip import Trip, TripStatusEnum
