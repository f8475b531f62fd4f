"""
Response construction for the catalog API.

Success responses carry a compact JSON body with ``Content-Type:
application/json``. Client error responses (400, 404) and 204 carry an empty
body and no content type.
"""

import json
from typing import Any, Dict, Optional

from aws_lambda_powertools.event_handler import Response, content_types
from pydantic import BaseModel


def _encode_model(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode='json')
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any) -> str:
    """
    Serialize a capability result to a JSON string.

    Pydantic models are dumped in JSON mode, plain containers are passed to
    ``json.dumps``. Anything else raises ``TypeError``.
    """
    return json.dumps(value, default=_encode_model, separators=(',', ':'))


def json_response(status_code: int, value: Any, headers: Optional[Dict[str, str]] = None) -> Response:
    """Build a response whose body is ``value`` serialized to JSON."""
    return Response(
        status_code=status_code,
        content_type=content_types.APPLICATION_JSON,
        body=to_json(value),
        headers=dict(headers) if headers else None,
    )


def empty_response(status_code: int) -> Response:
    """Build a response with no body."""
    return Response(status_code=status_code, body='')


def build_location(request_uri: str, resource_id: str) -> str:
    """
    Append a resource id to the URI of the collection it was created in.

    Examples:
        >>> build_location('/items', '42')
        '/items/42'
        >>> build_location('/items/', '42')
        '/items/42'
    """
    if request_uri.endswith('/'):
        return f'{request_uri}{resource_id}'
    return f'{request_uri}/{resource_id}'
