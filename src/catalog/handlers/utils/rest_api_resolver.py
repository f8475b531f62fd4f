"""
REST API resolver and route table utilities for the catalog Lambda handler.

Routes are declared once as an immutable table of ``Route`` entries using
``:name`` placeholders and compiled onto the API Gateway REST resolver at
import time. Matching is first-match in registration order; unmatched
requests get the resolver's default 404.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Set, Tuple

from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig

# API path constants
ITEMS_PATH = '/items'
ITEM_PATH = '/items/:id'

# Configure CORS
cors_config = CORSConfig(
    allow_origin="*",
    max_age=600,
    allow_headers=["content-type", "authorization"],
)

app = APIGatewayRestResolver(cors=cors_config)


@dataclass(frozen=True)
class Route:
    """A single entry of the route table."""

    method: str
    pattern: str
    handler: Callable[..., object]


def to_resolver_rule(pattern: str) -> str:
    """
    Translate ``:name`` segments into the resolver's ``<name>`` placeholders.

    Examples:
        >>> to_resolver_rule('/items/:id')
        '/items/<id>'
    """
    segments = []
    for segment in pattern.split('/'):
        if segment.startswith(':') and len(segment) > 1:
            segment = f'<{segment[1:]}>'
        segments.append(segment)
    return '/'.join(segments)


def register_routes(resolver: APIGatewayRestResolver, routes: Iterable[Route]) -> Tuple[Route, ...]:
    """
    Install a route table on a resolver.

    Args:
        resolver: API Gateway REST resolver to register on
        routes: Routes in priority order

    Returns:
        The registered routes as an immutable tuple

    Raises:
        ValueError: If two routes share the same method and pattern
    """
    registered = tuple(routes)
    seen: Set[Tuple[str, str]] = set()

    for route in registered:
        key = (route.method.upper(), route.pattern)
        if key in seen:
            raise ValueError(f"Duplicate route: {key[0]} {key[1]}")
        seen.add(key)

    for route in registered:
        resolver.route(to_resolver_rule(route.pattern), route.method.upper())(route.handler)

    return registered
