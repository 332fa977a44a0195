"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from taskflow.api.routes import auth, tasks, stats

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(tasks.router)
api_router.include_router(stats.router)
