"""Base models for camelCase request payloads and responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelPayload(BaseModel):
    """
    Request body with camelCase keys.

    Fields are typed ``Any`` so values reach the domain validators unchanged;
    the services, not pydantic, decide what is valid. Unknown keys (including
    ``id``) are ignored.
    """

    model_config = ConfigDict(alias_generator=to_camel, extra="ignore")

    def to_data(self) -> dict[str, Any]:
        """
        Return the supplied fields as a snake_case dict.

        Keys the client omitted are left out; explicit nulls are kept.
        """
        return self.model_dump(exclude_unset=True)


class CamelResponse(BaseModel):
    """Response body serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
