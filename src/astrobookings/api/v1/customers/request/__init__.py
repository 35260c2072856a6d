"""Customer Request Models."""

from typing import Any

from pydantic import Field

from astrobookings.api.v1.common.models import CamelPayload


class CustomerPayload(CamelPayload):
    """
    Create or update payload for a customer.

    Sending a different ``email`` on update moves the customer to that key.
    """

    email: Any = Field(None, description="Email address", examples=["ada@example.com"])
    name: Any = Field(None, description="Full name (2-100 characters)")
    phone: Any = Field(None, description="Phone number", examples=["+1 (555) 123-4567"])
