from fastapi import APIRouter

from backend.api.routes import tax

api_router = APIRouter()

api_router.include_router(tax.router)
