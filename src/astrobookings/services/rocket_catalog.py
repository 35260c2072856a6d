"""
Rocket catalog service.

Owns the rocket collection: validates rocket payloads, assigns identifiers and
applies create/update/delete operations. Rockets have no dependencies and
know nothing about the launches that reference them.
"""

import threading
from collections.abc import Mapping
from dataclasses import asdict
from typing import Any

from astrobookings.core.logging import logger
from astrobookings.domain.results import FieldError, NotFound, Ok, ValidationFailure
from astrobookings.domain.validation import as_integer, is_blank, merge_fields
from astrobookings.infrastructure.repositories.rocket_repository import (
    ROCKET_RANGES,
    Rocket,
    RocketRepository,
)
from astrobookings.utils.ids import IdGenerator, UUIDGenerator

ROCKET_FIELDS: tuple[str, ...] = ("name", "range", "capacity")
MIN_CAPACITY = 1
MAX_CAPACITY = 10


class RocketCatalog:
    """
    Service for rocket records.

    Every validate-then-commit sequence runs under the repository lock, which
    the launch schedule also takes while it reads rocket capacities.
    """

    resource = "Rocket"

    def __init__(
        self,
        repository: RocketRepository,
        id_generator: IdGenerator | None = None,
    ):
        """
        Initialize rocket catalog.

        Args:
            repository: Storage for rocket records
            id_generator: Identifier source (random UUIDs if omitted)
        """
        self._repository = repository
        self._next_id = id_generator or UUIDGenerator()

    @property
    def lock(self) -> threading.RLock:
        """Lock guarding the rocket collection."""
        return self._repository.lock

    def validate(self, data: Mapping[str, Any]) -> list[FieldError]:
        """
        Validate a complete rocket candidate.

        All rules are evaluated; errors are returned in field order.

        Args:
            data: Candidate values keyed by field name

        Returns:
            Field errors, empty when the candidate is valid
        """
        errors, _ = self._evaluate(data)
        return errors

    def _evaluate(
        self, data: Mapping[str, Any]
    ) -> tuple[list[FieldError], int | None]:
        errors: list[FieldError] = []
        value: int | None = None

        name = data.get("name")
        if is_blank(name):
            errors.append(FieldError("name", "Name is required"))
        elif not isinstance(name, str):
            errors.append(FieldError("name", "Name must be a string"))

        rocket_range = data.get("range")
        if rocket_range is None:
            errors.append(FieldError("range", "Range is required"))
        elif not isinstance(rocket_range, str) or rocket_range not in ROCKET_RANGES:
            errors.append(
                FieldError("range", f"Range must be one of: {', '.join(ROCKET_RANGES)}")
            )

        capacity = data.get("capacity")
        if capacity is None:
            errors.append(FieldError("capacity", "Capacity is required"))
        else:
            value = as_integer(capacity)
            if value is None or not MIN_CAPACITY <= value <= MAX_CAPACITY:
                errors.append(
                    FieldError(
                        "capacity",
                        f"Capacity must be an integer between {MIN_CAPACITY} "
                        f"and {MAX_CAPACITY} (inclusive)",
                    )
                )

        return errors, None if errors else value

    def create(self, data: Mapping[str, Any]) -> Ok[Rocket] | ValidationFailure:
        """
        Create a rocket.

        Args:
            data: Payload with name, range and capacity

        Returns:
            Ok with the stored rocket, or ValidationFailure
        """
        logger.info(f"Creating rocket: name={data.get('name')!r}")

        candidate = merge_fields({}, data, ROCKET_FIELDS)
        with self.lock:
            errors, capacity = self._evaluate(candidate)
            if errors or capacity is None:
                logger.error(f"Rocket validation failed: {errors}")
                return ValidationFailure(tuple(errors))

            rocket = self._build(self._next_id(), candidate, capacity)
            self._repository.add(rocket)

        logger.info(f"Rocket created: id={rocket.id}")
        return Ok(rocket)

    def list_all(self) -> list[Rocket]:
        """List rockets in insertion order."""
        rockets = self._repository.list_all()
        logger.info(f"Retrieved all rockets: count={len(rockets)}")
        return rockets

    def get_by_id(self, rocket_id: str) -> Rocket | None:
        """
        Look up a rocket.

        Returns:
            The rocket, or None if the id is unknown
        """
        rocket = self._repository.get(rocket_id)
        if rocket is None:
            logger.warning(f"Rocket not found: id={rocket_id}")
        return rocket

    def update(
        self, rocket_id: str, data: Mapping[str, Any]
    ) -> Ok[Rocket] | ValidationFailure | NotFound:
        """
        Merge ``data`` over an existing rocket and commit if the result is valid.

        Omitted fields keep their value; explicit None clears them (and fails
        validation). The id is never updatable.

        Args:
            rocket_id: Rocket to update
            data: Partial payload

        Returns:
            Ok with the updated rocket, ValidationFailure, or NotFound
        """
        logger.info(f"Updating rocket: id={rocket_id}")

        with self.lock:
            existing = self._repository.get(rocket_id)
            if existing is None:
                logger.warning(f"Rocket not found for update: id={rocket_id}")
                return NotFound(self.resource, rocket_id)

            candidate = merge_fields(asdict(existing), data, ROCKET_FIELDS)
            errors, capacity = self._evaluate(candidate)
            if errors or capacity is None:
                logger.error(f"Rocket validation failed on update: {errors}")
                return ValidationFailure(tuple(errors))

            rocket = self._build(existing.id, candidate, capacity)
            self._repository.replace(rocket)

        logger.info(f"Rocket updated: id={rocket_id}")
        return Ok(rocket)

    def delete(self, rocket_id: str) -> bool:
        """
        Delete a rocket.

        Launches that still reference it are left untouched; they fail with a
        rocket_id error on their next update.

        Returns:
            True if a rocket was removed
        """
        logger.info(f"Deleting rocket: id={rocket_id}")

        deleted = self._repository.remove(rocket_id)
        if deleted:
            logger.info(f"Rocket deleted: id={rocket_id}")
        else:
            logger.warning(f"Rocket not found for deletion: id={rocket_id}")
        return deleted

    @staticmethod
    def _build(
        rocket_id: str, candidate: Mapping[str, Any], capacity: int
    ) -> Rocket:
        return Rocket(
            id=rocket_id,
            name=candidate["name"].strip(),
            range=candidate["range"],
            capacity=capacity,
        )
