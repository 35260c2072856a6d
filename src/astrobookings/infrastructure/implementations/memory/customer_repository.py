"""In-memory customer repository keyed by email."""

from loguru import logger

from astrobookings.infrastructure.implementations.memory.base import InMemoryRepository
from astrobookings.infrastructure.repositories.customer_repository import (
    Customer,
    CustomerRepository,
)


class InMemoryCustomerRepository(InMemoryRepository[Customer], CustomerRepository):
    """Customers keyed by their literal (case-sensitive) email."""

    resource_name = "customer"

    def _key(self, record: Customer) -> str:
        return record.email

    def rekey(self, old_email: str, customer: Customer) -> None:
        with self._lock:
            if old_email not in self._records:
                raise KeyError(f"Unknown customer key: {old_email}")
            if customer.email != old_email and customer.email in self._records:
                raise KeyError(f"Duplicate customer key: {customer.email}")
            del self._records[old_email]
            self._records[customer.email] = customer

        logger.debug(f"Customer re-keyed from {old_email} to {customer.email}")
