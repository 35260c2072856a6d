"""
Launch schedule service.

Launches depend on the rocket catalog: a launch must reference an existing
rocket, its ``min_passengers`` is bounded by that rocket's capacity, and
``available_seats`` is taken from the capacity on every create and update.

Lock order is always rockets first, then launches. The rocket catalog never
takes the launch lock, so the two cannot deadlock.
"""

from collections.abc import Callable, Mapping
from dataclasses import asdict
from datetime import datetime
from typing import Any

from astrobookings.core.logging import logger
from astrobookings.domain.results import FieldError, NotFound, Ok, ValidationFailure
from astrobookings.domain.validation import (
    as_integer,
    as_number,
    is_blank,
    merge_fields,
    parse_date_time,
    utc_now,
)
from astrobookings.infrastructure.repositories.launch_repository import (
    Launch,
    LaunchRepository,
)
from astrobookings.infrastructure.repositories.rocket_repository import Rocket
from astrobookings.services.rocket_catalog import RocketCatalog
from astrobookings.utils.ids import IdGenerator, UUIDGenerator

LAUNCH_FIELDS: tuple[str, ...] = (
    "rocket_id",
    "launch_date_time",
    "price",
    "min_passengers",
)
MIN_PASSENGERS_FLOOR = 1


class LaunchSchedule:
    """Service for launch records."""

    resource = "Launch"

    def __init__(
        self,
        repository: LaunchRepository,
        rockets: RocketCatalog,
        id_generator: IdGenerator | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize launch schedule.

        Args:
            repository: Storage for launch records
            rockets: Rocket catalog used to resolve ``rocket_id`` (read only)
            id_generator: Identifier source (random UUIDs if omitted)
            clock: Returns the aware "now" used by the future-date rule
        """
        self._repository = repository
        self._rockets = rockets
        self._next_id = id_generator or UUIDGenerator()
        self._clock = clock

    def validate(self, data: Mapping[str, Any]) -> list[FieldError]:
        """
        Validate a complete launch candidate.

        Args:
            data: Candidate values keyed by field name

        Returns:
            Field errors, empty when the candidate is valid
        """
        errors, _ = self._evaluate(data)
        return errors

    def create(self, data: Mapping[str, Any]) -> Ok[Launch] | ValidationFailure:
        """
        Schedule a launch.

        ``available_seats`` is set to the referenced rocket's capacity at this
        instant.

        Args:
            data: Payload with rocket_id, launch_date_time, price, min_passengers

        Returns:
            Ok with the stored launch, or ValidationFailure
        """
        logger.info(f"Creating launch: rocket_id={data.get('rocket_id')!r}")

        candidate = merge_fields({}, data, LAUNCH_FIELDS)
        with self._rockets.lock, self._repository.lock:
            errors, fields = self._evaluate(candidate)
            if errors or fields is None:
                logger.error(f"Launch validation failed: {errors}")
                return ValidationFailure(tuple(errors))

            launch = Launch(id=self._next_id(), **fields)
            self._repository.add(launch)

        logger.info(f"Launch created: id={launch.id}, rocket_id={launch.rocket_id}")
        return Ok(launch)

    def list_all(self) -> list[Launch]:
        """List launches in insertion order."""
        launches = self._repository.list_all()
        logger.info(f"Retrieved all launches: count={len(launches)}")
        return launches

    def get_by_id(self, launch_id: str) -> Launch | None:
        """
        Look up a launch.

        A launch whose rocket was deleted is still returned as stored.

        Returns:
            The launch, or None if the id is unknown
        """
        launch = self._repository.get(launch_id)
        if launch is None:
            logger.warning(f"Launch not found: id={launch_id}")
        return launch

    def update(
        self, launch_id: str, data: Mapping[str, Any]
    ) -> Ok[Launch] | ValidationFailure | NotFound:
        """
        Merge ``data`` over an existing launch and commit if valid.

        ``rocket_id`` may be re-pointed. ``available_seats`` is recomputed from
        the resolved rocket's current capacity, not the stored value.

        Args:
            launch_id: Launch to update
            data: Partial payload

        Returns:
            Ok with the updated launch, ValidationFailure, or NotFound
        """
        logger.info(f"Updating launch: id={launch_id}")

        with self._rockets.lock, self._repository.lock:
            existing = self._repository.get(launch_id)
            if existing is None:
                logger.warning(f"Launch not found for update: id={launch_id}")
                return NotFound(self.resource, launch_id)

            candidate = merge_fields(asdict(existing), data, LAUNCH_FIELDS)
            errors, fields = self._evaluate(candidate)
            if errors or fields is None:
                logger.error(f"Launch validation failed on update: {errors}")
                return ValidationFailure(tuple(errors))

            launch = Launch(id=existing.id, **fields)
            self._repository.replace(launch)

        logger.info(
            f"Launch updated: id={launch_id}, available_seats={launch.available_seats}"
        )
        return Ok(launch)

    def delete(self, launch_id: str) -> bool:
        """
        Delete a launch.

        Returns:
            True if a launch was removed; False means not found
        """
        logger.info(f"Deleting launch: id={launch_id}")

        deleted = self._repository.remove(launch_id)
        if deleted:
            logger.info(f"Launch deleted: id={launch_id}")
        else:
            logger.warning(f"Launch not found for deletion: id={launch_id}")
        return deleted


    def _evaluate(
        self, data: Mapping[str, Any]
    ) -> tuple[list[FieldError], dict[str, Any] | None]:
        """Check every rule; on success also return the coerced record fields."""
        errors: list[FieldError] = []

        # 1. rocket reference; without it there is no capacity to bound against
        rocket: Rocket | None = None
        rocket_id = data.get("rocket_id")
        if is_blank(rocket_id):
            errors.append(FieldError("rocket_id", "Rocket ID is required"))
        else:
            if isinstance(rocket_id, str):
                rocket = self._rockets.get_by_id(rocket_id)
            if rocket is None:
                errors.append(FieldError("rocket_id", "Rocket reference is invalid"))

        # 2. launch date and time
        scheduled: datetime | None = None
        launch_date_time = data.get("launch_date_time")
        if is_blank(launch_date_time):
            errors.append(
                FieldError("launch_date_time", "Launch date and time is required")
            )
        else:
            scheduled = parse_date_time(launch_date_time)
            if scheduled is None:
                errors.append(
                    FieldError(
                        "launch_date_time",
                        "Launch date and time must be a valid ISO 8601 format",
                    )
                )
            elif scheduled <= self._clock():
                errors.append(
                    FieldError(
                        "launch_date_time", "Launch date and time must be in the future"
                    )
                )

        # 3. price
        amount: int | float | None = None
        price = data.get("price")
        if price is None:
            errors.append(FieldError("price", "Price is required"))
        else:
            amount = as_number(price)
            if amount is None or amount <= 0:
                errors.append(FieldError("price", "Price must be a positive number"))

        # 4. minimum passengers, one message per root cause
        passengers: int | None = None
        min_passengers = data.get("min_passengers")
        if min_passengers is None:
            errors.append(
                FieldError("min_passengers", "Minimum passengers is required")
            )
        else:
            passengers = as_integer(min_passengers)
            if rocket is not None:
                if passengers is None or not (
                    MIN_PASSENGERS_FLOOR <= passengers <= rocket.capacity
                ):
                    errors.append(
                        FieldError(
                            "min_passengers",
                            f"Minimum passengers must be an integer between "
                            f"{MIN_PASSENGERS_FLOOR} and {rocket.capacity} "
                            f"(rocket capacity)",
                        )
                    )
            elif passengers is None:
                errors.append(
                    FieldError("min_passengers", "Minimum passengers must be an integer")
                )

        if (
            errors
            or rocket is None
            or scheduled is None
            or amount is None
            or passengers is None
        ):
            return errors, None

        return errors, {
            "rocket_id": rocket.id,
            "launch_date_time": scheduled,
            "price": amount,
            "min_passengers": passengers,
            "available_seats": rocket.capacity,
        }
