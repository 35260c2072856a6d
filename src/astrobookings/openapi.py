"""OpenAPI schema customization for the AstroBookings API."""

from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from astrobookings.models.errors import ProblemDetail

PROBLEM_RESPONSES = {
    "400": "Validation Error",
    "404": "Not Found",
    "500": "Internal Server Error",
}


def custom_openapi(app: FastAPI) -> dict[str, Any]:
    """Generate customized OpenAPI schema for the API.

    Args:
        app: The FastAPI application instance.

    Returns:
        Customized OpenAPI schema dictionary.
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description="""
# AstroBookings API

Catalog of rockets, schedule of launches and directory of customers for a
space-travel booking service. All data is kept in memory.

## API Endpoints

### Health Check
- `GET /health` - Service status, version and uptime

### Rockets
- `POST /rockets` - Register a rocket
- `GET /rockets` - List rockets
- `GET /rockets/{id}` - Get a rocket
- `PUT /rockets/{id}` - Update a rocket
- `DELETE /rockets/{id}` - Delete a rocket

### Launches
- `POST /launches` - Schedule a launch for an existing rocket
- `GET /launches` - List launches
- `GET /launches/{id}` - Get a launch
- `PUT /launches/{id}` - Update a launch
- `DELETE /launches/{id}` - Delete a launch

### Customers
- `POST /customers` - Register a customer
- `GET /customers` - List customers
- `GET /customers/{email}` - Get a customer
- `PUT /customers/{email}` - Update a customer (the email may change)
- `DELETE /customers/{email}` - Delete a customer

## Error Handling

All errors follow [RFC 7807 Problem Details](https://datatracker.ietf.org/doc/html/rfc7807) format.
Validation failures list every offending field:

```json
{
  "type": "https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.1",
  "title": "Validation Error",
  "status": 400,
  "detail": "One or more validation errors occurred (2 errors).",
  "instance": "/rockets",
  "errors": [
    {"field": "name", "message": "Name is required"},
    {"field": "capacity", "message": "Capacity must be an integer between 1 and 10 (inclusive)"}
  ]
}
```
        """,
        routes=app.routes,
        license_info={
            "name": "MIT License",
            "url": "https://opensource.org/licenses/MIT",
        },
    )

    openapi_schema["tags"] = [
        {
            "name": "Health",
            "description": "Health check endpoints for monitoring",
        },
        {
            "name": "Rockets",
            "description": "Rocket catalog: name, range and passenger capacity",
        },
        {
            "name": "Launches",
            "description": "Scheduled launches referencing a rocket",
        },
        {
            "name": "Customers",
            "description": "Customer directory keyed by email",
        },
    ]

    components = openapi_schema.setdefault("components", {})
    schemas = components.setdefault("schemas", {})
    schemas.setdefault(
        "ProblemDetail",
        ProblemDetail.model_json_schema(ref_template="#/components/schemas/{model}"),
    )
    definitions = schemas["ProblemDetail"].pop("$defs", {})
    for name, schema in definitions.items():
        schemas.setdefault(name, schema)

    # RFC 7807 error responses on every resource operation
    for route_path, path in openapi_schema["paths"].items():
        if route_path == "/health":
            continue
        for operation in path.values():
            if isinstance(operation, dict) and "responses" in operation:
                operation["responses"].pop("422", None)
                for status, description in PROBLEM_RESPONSES.items():
                    if status == "404" and "{" not in route_path:
                        continue
                    operation["responses"][status] = {
                        "description": description,
                        "content": {
                            "application/json": {
                                "schema": {"$ref": "#/components/schemas/ProblemDetail"}
                            }
                        },
                    }

    app.openapi_schema = openapi_schema
    return app.openapi_schema


def configure_openapi(app: FastAPI) -> None:
    """Configure the FastAPI app to use custom OpenAPI schema.

    Args:
        app: The FastAPI application instance.
    """
    app.openapi = lambda: custom_openapi(app)  # type: ignore[method-assign]
