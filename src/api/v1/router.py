from fastapi import APIRouter

from .endpoints import auth, health, news

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(news.router, tags=["news"])
