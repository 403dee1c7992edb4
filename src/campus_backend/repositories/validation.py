from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from campus_backend.exceptions import ValidationException

M = TypeVar("M", bound=BaseModel)


def format_errors(error: ValidationError) -> List[Dict[str, str]]:
    return [
        {"field": ".".join(str(part) for part in err["loc"]) or "__root__", "message": err["msg"]}
        for err in error.errors()
    ]


def validation_exception(
    error: Exception,
    entity_type: Optional[str],
    identifier: Any = None,
) -> ValidationException:
    """Translate a pydantic ValidationError or a model ValueError."""
    if isinstance(error, ValidationError):
        errors = format_errors(error)
        fields = ", ".join(e["field"] for e in errors)
        return ValidationException(
            detail=f"Invalid {entity_type}: {fields}",
            entity_type=entity_type,
            identifier=identifier,
            context={"errors": errors},
        )
    return ValidationException(
        detail=f"Invalid {entity_type}: {error}",
        entity_type=entity_type,
        identifier=identifier,
    )


def validate_record(
    model: Type[M],
    data: Any,
    entity_type: Optional[str] = None,
    identifier: Any = None,
) -> M:
    """
    Validate data (dict or model instance) against model.

    Raises:
        ValidationException: VAL_001 naming the failing fields
    """
    if isinstance(data, BaseModel):
        data = data.model_dump()
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise validation_exception(e, entity_type or model.__name__, identifier) from e
