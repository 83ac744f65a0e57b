import asyncio

import pytest

from user_directory_api.app.core.errors import UserNotFoundError
from user_directory_api.app.core.security import verify_password
from user_directory_api.app.schemas.user import UserCreate, UserPatch, UserPut


def run(coro):
    return asyncio.run(coro)


def test_create_user_hashes_password(service):
    user_id = run(service.create_user(UserCreate(email="a@x.com", password="p")))

    user = run(service.get_user_by_email("a@x.com"))
    assert user.id == user_id
    assert user.password != "p"
    assert verify_password("p", user.password)


def test_create_user_accepts_camel_case_fields(service):
    data = UserCreate.model_validate(
        {"email": "a@x.com", "password": "p", "firstName": "Ada", "permissionLevel": 2}
    )

    user_id = run(service.create_user(data))

    user = run(service.get_user_by_id(user_id))
    assert user.first_name == "Ada"
    assert user.permission_level == 2


def test_put_user_replaces_every_field(service):
    user_id = run(
        service.create_user(UserCreate(email="a@x.com", password="p", first_name="Ada", last_name="L"))
    )

    run(service.put_user(user_id, UserPut(email="a@x.com", password="q", permission_level=3)))

    user = run(service.get_user_by_id(user_id))
    assert user.id == user_id
    assert user.first_name is None
    assert user.last_name is None
    assert user.permission_level == 3
    assert verify_password("q", user.password)


def test_patch_user_applies_only_sent_fields(service):
    user_id = run(service.create_user(UserCreate(email="a@x.com", password="p", first_name="Ada")))

    run(service.patch_user(user_id, UserPatch(last_name="Z")))

    user = run(service.get_user_by_id(user_id))
    assert user.first_name == "Ada"
    assert user.last_name == "Z"
    assert verify_password("p", user.password)


def test_patch_user_rehashes_password(service):
    user_id = run(service.create_user(UserCreate(email="a@x.com", password="p")))

    run(service.patch_user(user_id, UserPatch(password="new")))

    user = run(service.get_user_by_id(user_id))
    assert user.password != "new"
    assert verify_password("new", user.password)


def test_patch_user_ignores_null_password(service):
    user_id = run(service.create_user(UserCreate(email="a@x.com", password="p")))

    run(service.patch_user(user_id, UserPatch(password=None)))

    user = run(service.get_user_by_id(user_id))
    assert verify_password("p", user.password)


def test_delete_missing_user_raises(service):
    with pytest.raises(UserNotFoundError):
        run(service.delete_user("missing"))
