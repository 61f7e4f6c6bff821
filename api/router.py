from fastapi import APIRouter
from api.endpoints.analyze import router as analyze_router

api_router = APIRouter()
api_router.include_router(analyze_router, tags=["analyze"])
