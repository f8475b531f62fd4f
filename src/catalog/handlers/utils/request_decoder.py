"""
Request body decoding into command payload models.

A body that is missing, is not JSON, or does not match the payload model
raises ``PayloadDecodeError`` so the handler can answer 400 without touching
the command capability.
"""

from typing import Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from catalog.handlers.utils.errors import PayloadDecodeError

ModelT = TypeVar('ModelT', bound=BaseModel)


def decode_payload(model: Type[ModelT], body: Optional[Union[str, bytes]]) -> ModelT:
    """
    Parse a raw request body into ``model``.

    Args:
        model: Pydantic model class to decode into
        body: Raw request body as delivered by API Gateway

    Returns:
        The decoded model instance

    Raises:
        PayloadDecodeError: If the body is empty or fails JSON/model validation
    """
    if not body:
        raise PayloadDecodeError(message=f"Empty request body for {model.__name__}")

    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        field_errors = [
            {"field": ".".join(str(loc) for loc in error["loc"]), "message": error["msg"]}
            for error in e.errors()
        ]
        raise PayloadDecodeError(
            message=f"Request body is not a valid {model.__name__}",
            field_errors=field_errors,
        ) from e
