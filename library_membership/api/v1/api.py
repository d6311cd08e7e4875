from fastapi import APIRouter

from library_membership.api.v1.routes_auth import router as auth_router
from library_membership.api.v1.routes_users import router as users_router
from library_membership.api.v1.routes_libraries import router as libraries_router
from library_membership.api.v1.routes_memberships import router as memberships_router


api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(users_router, prefix="/users", tags=["users"])
api_router.include_router(libraries_router, prefix="/libraries", tags=["libraries"])
api_router.include_router(memberships_router, prefix="/memberships", tags=["memberships"])
