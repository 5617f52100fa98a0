# This project was developed with assistance from AI tools.
"""Domain error hierarchy.

Services raise these; the single set of exception handlers in ``main`` turns
them into the JSON error envelope. Routes catch nothing they cannot act on.
"""

from typing import Any


class WarrantyAPIError(Exception):
    """Base class for errors with a stable HTTP mapping."""

    status_code: int = 500
    code: str = "internal_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        fields: list[dict[str, Any]] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.fields = fields


class ValidationError(WarrantyAPIError):
    """Malformed or missing input."""

    status_code = 422
    code = "validation_error"


class NotFoundError(WarrantyAPIError):
    """Referenced entity does not exist."""

    status_code = 404
    code = "not_found"

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class AuthError(WarrantyAPIError):
    """Missing, malformed, invalid or expired credential."""

    status_code = 401
    code = "auth_required"


class ConflictError(WarrantyAPIError):
    """Duplicate key or illegal state transition."""

    status_code = 409
    code = "conflict"


class StoreError(WarrantyAPIError):
    """Underlying persistence failure."""

    status_code = 500
    code = "store_error"


class IntegrationError(WarrantyAPIError):
    """Upstream spreadsheet call failed or answered ``success: false``."""

    status_code = 502
    code = "integration_error"


class IntegrationUnavailableError(WarrantyAPIError):
    """Spreadsheet adapter is not configured."""

    status_code = 503
    code = "integration_unavailable"
