"""Shared dependencies for API routers."""

import logging
from typing import Optional

from fastapi import HTTPException, Request

from actions import ActionContext, User
from config import AppConfig, ConfigManager
from storage import SQLiteStore

logger = logging.getLogger(__name__)

# Global instances - set by main.py lifespan
_store: Optional[SQLiteStore] = None
_config_manager: Optional[ConfigManager] = None
_app_config: Optional[AppConfig] = None


def set_store(store: Optional[SQLiteStore]) -> None:
    """Set the global store instance (called from main.py lifespan)."""
    global _store
    _store = store


def set_config(config: Optional[AppConfig], manager: Optional[ConfigManager] = None) -> None:
    """Set the active configuration (called from main.py lifespan)."""
    global _app_config, _config_manager
    _app_config = config
    _config_manager = manager


def get_store() -> SQLiteStore:
    """Dependency for getting the SQLite store."""
    if _store is None:
        raise HTTPException(status_code=503, detail="Store not initialized")
    return _store


def get_config() -> AppConfig:
    """Dependency for getting the active configuration."""
    if _app_config is None:
        raise HTTPException(status_code=503, detail="Config not initialized")
    return _app_config


def get_config_manager() -> Optional[ConfigManager]:
    return _config_manager


def get_action_context(request: Request) -> ActionContext:
    """Build the action context for a request.

    The user id is read from the header named by ``api.user_header``
    (``X-User-Id`` by default), set by the authenticating proxy. A missing
    or blank header gives an anonymous context; actions reject it.
    """
    config = get_config()
    user_id = (request.headers.get(config.api.user_header) or "").strip()
    user = User(id=user_id) if user_id else None
    return ActionContext(store=get_store(), user=user)
