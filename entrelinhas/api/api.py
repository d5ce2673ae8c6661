"""API router aggregation."""
from fastapi import APIRouter

from entrelinhas.api.endpoints import auth, me, posts

api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(posts.router)
api_router.include_router(me.router)
