"""Launch API Routes - Route registration only."""

from fastapi import APIRouter

from astrobookings.api.v1 import LAUNCHES_PREFIX
from astrobookings.api.v1.launches import api

router = APIRouter()
router.include_router(api.router, prefix=LAUNCHES_PREFIX, tags=["Launches"])
