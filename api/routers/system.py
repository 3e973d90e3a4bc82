"""System router for the Ad Copy Assistant."""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_config, get_config_manager
from api.schemas import HealthResponse
from config import AppConfig

logger = logging.getLogger(__name__)

router = APIRouter(tags=["System"])

API_VERSION = "0.1.0"


@router.get("/health", response_model=HealthResponse)
async def health_check(config: AppConfig = Depends(get_config)):
    """Report service status and whether the database file exists."""
    manager = get_config_manager()
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        configured=manager.is_configured() if manager else False,
        database_exists=config.db_path.exists(),
    )
