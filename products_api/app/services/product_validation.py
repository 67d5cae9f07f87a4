"""
Validation of submitted product payloads.

The field rules live on the ``ProductCreate`` / ``ProductUpdate``
schemas; the functions here run them against the raw request body and
translate pydantic's error list into the API's ``ValidationError``.
Pydantic checks every field, so a client sees all problems in a single
response, in field order.
"""

from typing import Any, Dict, List, Mapping

from pydantic import ValidationError as SchemaValidationError

from ..core.errors import ValidationError
from ..schemas.product import ProductCreate, ProductUpdate


NOT_AN_OBJECT = "Request body must be a JSON object"

# ``null`` for these fields means "not provided" on update; ``inStock``
# is deliberately absent so that ``null`` is rejected as a non-boolean.
NULLABLE_UPDATE_FIELDS = ("name", "description", "price", "category")


def _require_mapping(candidate: Any) -> Mapping[str, Any]:
    if not isinstance(candidate, Mapping):
        raise ValidationError(details=[NOT_AN_OBJECT])
    return candidate


def schema_error_details(exc: SchemaValidationError) -> List[str]:
    """Return one message per failed field.

    Messages raised by the schema validators are used verbatim; other
    pydantic errors fall back to pydantic's own message.
    """
    details: List[str] = []
    for error in exc.errors():
        cause = error.get("ctx", {}).get("error")
        details.append(str(cause) if error["type"] == "value_error" and cause else error["msg"])
    return details


def validate_create(candidate: Any) -> ProductCreate:
    """Validate a create payload.

    ``name``, ``description``, ``price`` and ``category`` are required;
    ``inStock`` is optional and taken by truthiness.

    Raises
    ------
    ValidationError
        With one detail per missing or invalid field.
    """
    data = _require_mapping(candidate)
    try:
        return ProductCreate.model_validate(data)
    except SchemaValidationError as exc:
        raise ValidationError(details=schema_error_details(exc)) from exc


def validate_update(candidate: Any) -> ProductUpdate:
    """Validate a partial update payload.

    Absent fields are neither checked nor applied, and ``null`` counts
    as absent except for ``inStock``.  Unknown fields, including ``id``,
    are ignored.

    Raises
    ------
    ValidationError
        With one detail per invalid field.
    """
    data = _require_mapping(candidate)
    present: Dict[str, Any] = {
        key: value
        for key, value in data.items()
        if not (value is None and key in NULLABLE_UPDATE_FIELDS)
    }
    try:
        return ProductUpdate.model_validate(present)
    except SchemaValidationError as exc:
        raise ValidationError(details=schema_error_details(exc)) from exc
