"""
Abstract interface for customer storage.

The email address is the primary key. Changing a customer's email moves the
record to a new key, which implementations perform atomically via ``rekey``.
"""

from abc import abstractmethod
from dataclasses import dataclass

from astrobookings.infrastructure.repositories.base import Repository


@dataclass
class Customer:
    """
    Customer record.

    Attributes:
        email: Primary key, case preserved as supplied
        name: Trimmed display name (2-100 characters)
        phone: Contact phone number
    """

    email: str
    name: str
    phone: str


class CustomerRepository(Repository[Customer]):
    """Storage contract for customer records keyed by ``Customer.email``."""

    @abstractmethod
    def rekey(self, old_email: str, customer: Customer) -> None:
        """
        Move a record from ``old_email`` to ``customer.email``.

        Args:
            old_email: Current key of the record
            customer: Updated record stored under its own email

        Raises:
            KeyError: If ``old_email`` is unknown or the new email is taken
        """
        pass
