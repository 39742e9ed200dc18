from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database.session import get_db
from app.schemas.engine import EngineRequest, EngineResponse
from app.services.engine_service import EngineService
from app.utils.response_utils import ResponseWrapper
from app.core.exceptions import FleetError
from common_utils.auth.middleware import get_current_username
from app.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/engines", tags=["engines"])


def get_engine_service() -> EngineService:
    return EngineService()


@router.get("", response_model=dict)
def list_engines(
    db: Session = Depends(get_db),
    engine_service: EngineService = Depends(get_engine_service),
    username: str = Depends(get_current_username),
):
    engines = engine_service.list_engines(db)
    return ResponseWrapper.success(
        data=[EngineResponse.model_validate(e) for e in engines],
        message=f"Fetched {len(engines)} engines",
    )


@router.get("/{engine_id}", response_model=dict)
def get_engine(
    engine_id: str,
    db: Session = Depends(get_db),
    engine_service: EngineService = Depends(get_engine_service),
    username: str = Depends(get_current_username),
):
    engine = engine_service.get_engine(db, engine_id)
    return ResponseWrapper.success(data=EngineResponse.model_validate(engine))


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
def create_engine(
    engine_in: EngineRequest,
    db: Session = Depends(get_db),
    engine_service: EngineService = Depends(get_engine_service),
    username: str = Depends(get_current_username),
):
    try:
        engine = engine_service.create_engine(db, engine_in)
    except FleetError as e:
        logger.warning(f"[EngineCreate] Rejected by user={username} | {e.message}")
        raise

    return ResponseWrapper.created(
        data=EngineResponse.model_validate(engine),
        message="Engine created successfully",
    )


@router.put("/{engine_id}", response_model=dict)
def update_engine(
    engine_id: str,
    engine_in: EngineRequest,
    db: Session = Depends(get_db),
    engine_service: EngineService = Depends(get_engine_service),
    username: str = Depends(get_current_username),
):
    engine = engine_service.update_engine(db, engine_id, engine_in)
    return ResponseWrapper.updated(
        data=EngineResponse.model_validate(engine),
        message="Engine updated successfully",
    )


@router.delete("/{engine_id}", response_model=dict)
def delete_engine(
    engine_id: str,
    db: Session = Depends(get_db),
    engine_service: EngineService = Depends(get_engine_service),
    username: str = Depends(get_current_username),
):
    """
    Delete an engine. Engines still referenced by a car cannot be deleted.
    """
    engine = engine_service.delete_engine(db, engine_id)
    return ResponseWrapper.deleted(
        data=EngineResponse.model_validate(engine),
        message="Engine deleted successfully",
    )
