import logging

from fastapi import APIRouter, Depends, status

from resume_forge.storage import KeyValueStore, StorageError
from ..dependencies import get_store

logger = logging.getLogger(__name__)

health_check = APIRouter()


@health_check.get("/ping", tags=["Health check"], status_code=status.HTTP_200_OK)
async def ping(store: KeyValueStore = Depends(get_store)):
    """health check endpoint for the master profile store"""
    try:
        store.get("__ping__")
        store_status = "reachable"
    except StorageError:
        logger.error("Store health check failed", exc_info=True)
        store_status = "unreachable"
    return {"message": "pong", "store": store_status}
