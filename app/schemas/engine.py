from pydantic import BaseModel, ConfigDict, Field
from uuid import UUID


class EngineRequest(BaseModel):
    # Missing values default to 0 so the domain validator reports them
    displacement: int = 0
    no_of_cylinders: int = 0
    car_range: int = 0


class EngineResponse(BaseModel):
    engine_id: UUID = Field(validation_alias="id")
    displacement: int
    no_of_cylinders: int
    car_range: int

    model_config = ConfigDict(from_attributes=True)
