"""Health check endpoint."""
from fastapi import APIRouter, Depends

from app.core.store import UserStore, get_store

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(store: UserStore = Depends(get_store)):
    return {"status": "ok", "users": len(store)}
