"""Rocket API Routes - Route registration only."""

from fastapi import APIRouter

from astrobookings.api.v1 import ROCKETS_PREFIX
from astrobookings.api.v1.rockets import api

router = APIRouter()
router.include_router(api.router, prefix=ROCKETS_PREFIX, tags=["Rockets"])
