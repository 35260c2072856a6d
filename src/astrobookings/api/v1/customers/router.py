"""Customer API Routes - Route registration only."""

from fastapi import APIRouter

from astrobookings.api.v1 import CUSTOMERS_PREFIX
from astrobookings.api.v1.customers import api

router = APIRouter()
router.include_router(api.router, prefix=CUSTOMERS_PREFIX, tags=["Customers"])
