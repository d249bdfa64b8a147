# app/routes/__init__.py
from fastapi import APIRouter
from app.routes.trip import trip_routes, participant_routes
from app.routes.activities import activity_routes
from app.routes.links import link_routes


api_router = APIRouter()

# Trip routes
api_router.include_router(trip_routes.router)
api_router.include_router(participant_routes.router)

# Activity routes
api_router.include_router(activity_routes.router)

# Link routes
api_router.include_router(link_routes.router)
