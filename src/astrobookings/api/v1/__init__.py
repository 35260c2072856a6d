"""
API v1 endpoints.

Route prefix constants for consistent API versioning.
"""

# Resources are served at the root, matching the public contract
API_V1_PREFIX: str = ""

# Module-specific prefixes
ROCKETS_PREFIX: str = f"{API_V1_PREFIX}/rockets"
LAUNCHES_PREFIX: str = f"{API_V1_PREFIX}/launches"
CUSTOMERS_PREFIX: str = f"{API_V1_PREFIX}/customers"

__all__ = [
    "API_V1_PREFIX",
    "ROCKETS_PREFIX",
    "LAUNCHES_PREFIX",
    "CUSTOMERS_PREFIX",
]
