"""API v1 router aggregation.

Includes all endpoint modules with their prefix and tags. The dashboard
user routes keep the console's historical path (/dashboardUser).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import dashboard_users, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    dashboard_users.router, prefix="/dashboardUser", tags=["dashboard-users"]
)
