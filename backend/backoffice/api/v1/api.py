from fastapi import APIRouter
from backoffice.api.v1.endpoints import admin, employee, public

api_router = APIRouter()
api_router.include_router(public.router, tags=["public"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
api_router.include_router(employee.router, prefix="/employee", tags=["employee"])
