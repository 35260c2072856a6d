"""Customer Response Models."""

from dataclasses import asdict

from pydantic import Field

from astrobookings.api.v1.common.models import CamelResponse
from astrobookings.infrastructure.repositories.customer_repository import Customer


class CustomerResponse(CamelResponse):
    """Customer record as returned by the API."""

    email: str = Field(..., description="Email address (primary key)")
    name: str = Field(..., description="Full name")
    phone: str = Field(..., description="Phone number")

    @classmethod
    def from_record(cls, customer: Customer) -> "CustomerResponse":
        return cls(**asdict(customer))
