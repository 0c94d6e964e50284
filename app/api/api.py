from fastapi import APIRouter
from .endpoints import comments, users

api_router = APIRouter()

api_router.include_router(comments.router, prefix="/comments", tags=["Comments"])
api_router.include_router(users.router, prefix="/users", tags=["Users"])
