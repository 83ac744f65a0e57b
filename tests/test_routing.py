from fastapi import APIRouter, FastAPI, status
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient

from user_directory_api.app.api.v1.endpoints import users
from user_directory_api.app.api.v1.routing import RouteConfig, register_routes
from user_directory_api.app.api.v1.validators import (
    validate_required_user_body_fields,
    validate_same_email_belong_to_same_user,
    validate_same_email_doesnt_exist,
    validate_user_exists,
)
from user_directory_api.app.core.errors import UserValidationError


def _chain(method, path):
    for route in users.router.routes:
        if route.path == path and method in route.methods:
            return [dep.dependency for dep in route.dependencies]
    raise AssertionError(f"no route for {method} {path}")


def test_user_route_table_chains():
    assert _chain("GET", "") == []
    assert _chain("POST", "") == [validate_required_user_body_fields, validate_same_email_doesnt_exist]
    assert _chain("GET", "/{user_id}") == [validate_user_exists]
    assert _chain("PUT", "/{user_id}") == [
        validate_user_exists,
        validate_required_user_body_fields,
        validate_same_email_belong_to_same_user,
    ]
    assert _chain("PATCH", "/{user_id}") == [validate_user_exists, validate_same_email_belong_to_same_user]
    assert _chain("DELETE", "/{user_id}") == [validate_user_exists]


def test_every_config_is_registered():
    registered = {(method, route.path) for route in users.router.routes for method in route.methods}

    assert registered == {(config.method, config.path) for config in users.USER_ROUTES}


def test_first_failing_validator_short_circuits():
    calls = []

    async def first() -> None:
        calls.append("first")
        raise UserValidationError("first failed")

    async def second() -> None:
        calls.append("second")

    async def handler() -> dict:
        calls.append("handler")
        return {}

    router = register_routes(
        APIRouter(),
        [RouteConfig("GET", "/thing", handler, validators=[first, second])],
    )
    app = FastAPI()

    @app.exception_handler(UserValidationError)
    async def on_error(request, exc):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    app.include_router(router)

    resp = TestClient(app).get("/thing")

    assert resp.status_code == status.HTTP_400_BAD_REQUEST
    assert resp.json() == {"error": "first failed"}
    assert calls == ["first"]


def test_validators_run_in_order_before_handler():
    calls = []

    async def first() -> None:
        calls.append("first")

    async def second() -> None:
        calls.append("second")

    async def handler() -> dict:
        calls.append("handler")
        return {"ok": True}

    app = FastAPI()
    app.include_router(
        register_routes(
            APIRouter(),
            [RouteConfig("POST", "/thing", handler, validators=[first, second], status_code=201)],
        )
    )

    resp = TestClient(app).post("/thing")

    assert resp.status_code == 201
    assert resp.json() == {"ok": True}
    assert calls == ["first", "second", "handler"]
