"""
Customer directory service.

Customers are keyed by email: the email is the primary key, not a separate
identifier. Keys are compared as literal strings after trimming, so
``a@example.com`` and ``A@example.com`` are two different customers.
"""

import re
import threading
from collections.abc import Mapping
from dataclasses import asdict
from typing import Any

from astrobookings.core.logging import logger
from astrobookings.domain.results import FieldError, NotFound, Ok, ValidationFailure
from astrobookings.domain.validation import is_blank, merge_fields
from astrobookings.infrastructure.repositories.customer_repository import (
    Customer,
    CustomerRepository,
)

CUSTOMER_FIELDS: tuple[str, ...] = ("email", "name", "phone")
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_PATTERN = re.compile(r"\+?[\d\s\-()]+", re.ASCII)
EMAIL_EXISTS_ERROR = "Email already exists"


class CustomerDirectory:
    """
    Service for customer records.

    Uniqueness checks and the commit that follows them run under the
    repository lock.
    """

    resource = "Customer"

    def __init__(self, repository: CustomerRepository):
        """
        Initialize customer directory.

        Args:
            repository: Storage for customer records
        """
        self._repository = repository

    @property
    def lock(self) -> threading.RLock:
        """Lock guarding the customer collection."""
        return self._repository.lock

    def validate(
        self, data: Mapping[str, Any], current_email: str | None = None
    ) -> list[FieldError]:
        """
        Validate a complete customer candidate.

        Args:
            data: Candidate values keyed by field name
            current_email: Key of the record being updated; None on create.
                Keeping the same email is not a collision.

        Returns:
            Field errors, empty when the candidate is valid
        """
        errors: list[FieldError] = []

        email = data.get("email")
        if is_blank(email):
            errors.append(FieldError("email", "Email is required"))
        elif not is_valid_email(email):
            errors.append(FieldError("email", "Invalid email format"))
        else:
            email = email.strip()
            if email != current_email and self._repository.get(email) is not None:
                errors.append(FieldError("email", EMAIL_EXISTS_ERROR))

        name = data.get("name")
        if is_blank(name):
            errors.append(FieldError("name", "Name is required"))
        elif (
            not isinstance(name, str)
            or not MIN_NAME_LENGTH <= len(name.strip()) <= MAX_NAME_LENGTH
        ):
            errors.append(
                FieldError(
                    "name",
                    f"Name must be between {MIN_NAME_LENGTH} and "
                    f"{MAX_NAME_LENGTH} characters",
                )
            )

        phone = data.get("phone")
        if is_blank(phone):
            errors.append(FieldError("phone", "Phone is required"))
        elif not is_valid_phone(phone):
            errors.append(FieldError("phone", "Invalid phone format"))

        return errors

    def create(self, data: Mapping[str, Any]) -> Ok[Customer] | ValidationFailure:
        """
        Create a customer.

        Args:
            data: Payload with email, name and phone

        Returns:
            Ok with the stored customer, or ValidationFailure
        """
        logger.info(f"Creating customer: email={data.get('email')!r}")

        candidate = merge_fields({}, data, CUSTOMER_FIELDS)
        with self.lock:
            errors = self.validate(candidate)
            if errors:
                logger.error(f"Customer validation failed: {errors}")
                return ValidationFailure(tuple(errors))

            customer = self._build(candidate)
            self._repository.add(customer)

        logger.info(f"Customer created: email={customer.email}")
        return Ok(customer)

    def list_all(self) -> list[Customer]:
        """List customers in insertion order."""
        customers = self._repository.list_all()
        logger.info(f"Retrieved all customers: count={len(customers)}")
        return customers

    def get_by_email(self, email: str) -> Customer | None:
        """
        Look up a customer by exact email.

        Returns:
            The customer, or None if the email is unknown
        """
        customer = self._repository.get(email)
        if customer is None:
            logger.warning(f"Customer not found: email={email}")
        return customer

    def update(
        self, email: str, data: Mapping[str, Any]
    ) -> Ok[Customer] | ValidationFailure | NotFound:
        """
        Merge ``data`` over an existing customer and commit if valid.

        Changing the email re-keys the record: the old key disappears and the
        record is stored under the new one.

        Args:
            email: Current key of the customer
            data: Partial payload

        Returns:
            Ok with the updated customer, ValidationFailure, or NotFound
        """
        logger.info(f"Updating customer: email={email}")

        with self.lock:
            existing = self._repository.get(email)
            if existing is None:
                logger.warning(f"Customer not found for update: email={email}")
                return NotFound(self.resource, email)

            candidate = merge_fields(asdict(existing), data, CUSTOMER_FIELDS)
            errors = self.validate(candidate, current_email=email)
            if errors:
                logger.error(f"Customer validation failed on update: {errors}")
                return ValidationFailure(tuple(errors))

            customer = self._build(candidate)
            if customer.email != email:
                self._repository.rekey(email, customer)
            else:
                self._repository.replace(customer)

        logger.info(f"Customer updated: email={customer.email}")
        return Ok(customer)

    def delete(self, email: str) -> bool:
        """
        Delete a customer.

        Returns:
            True if a customer was removed
        """
        logger.info(f"Deleting customer: email={email}")

        deleted = self._repository.remove(email)
        if deleted:
            logger.info(f"Customer deleted: email={email}")
        else:
            logger.warning(f"Customer not found for deletion: email={email}")
        return deleted

    @staticmethod
    def _build(candidate: Mapping[str, Any]) -> Customer:
        return Customer(
            email=candidate["email"].strip(),
            name=candidate["name"].strip(),
            phone=candidate["phone"].strip(),
        )


def is_valid_email(value: Any) -> bool:
    """
    Check the ``local@domain.tld`` shape.

    A doubled ``@@`` is always rejected.
    """
    if not isinstance(value, str):
        return False
    email = value.strip()
    return "@@" not in email and EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_phone(value: Any) -> bool:
    """Optional leading ``+`` then digits, spaces, hyphens and parentheses."""
    if not isinstance(value, str):
        return False
    return PHONE_PATTERN.fullmatch(value.strip()) is not None
