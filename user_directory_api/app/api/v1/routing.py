"""
Table‑driven route registration.

Routes are described by ``RouteConfig`` records instead of being
decorated one by one.  Each record names the HTTP method, the path,
the ordered list of validation dependencies and the handler; the
validators run in the listed order before the handler, and the first
one that raises decides the response.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Optional

from fastapi import APIRouter, Depends, status


@dataclass
class RouteConfig:
    method: str
    path: str
    handler: Callable[..., Any]
    validators: List[Callable[..., Any]] = field(default_factory=list)
    status_code: int = status.HTTP_200_OK
    response_model: Any = None
    summary: Optional[str] = None


def register_routes(router: APIRouter, routes: Iterable[RouteConfig]) -> APIRouter:
    """Add every route in ``routes`` to ``router`` and return it."""
    for route in routes:
        router.add_api_route(
            route.path,
            route.handler,
            methods=[route.method],
            dependencies=[Depends(validator) for validator in route.validators],
            status_code=route.status_code,
            response_model=route.response_model,
            summary=route.summary,
            name=route.handler.__name__,
        )
    return router
