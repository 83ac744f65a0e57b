from user_directory_api.app.core.security import hash_password, verify_password


def test_hash_is_salted_and_verifies():
    first = hash_password("secret")
    second = hash_password("secret")

    assert first != second
    assert "secret" not in first
    assert verify_password("secret", first)
    assert verify_password("secret", second)


def test_wrong_password_does_not_verify():
    assert not verify_password("wrong", hash_password("secret"))


def test_hash_records_its_iterations():
    hashed = hash_password("secret", iterations=1234)

    assert hashed.startswith("1234$")
    assert verify_password("secret", hashed)


def test_malformed_hash_does_not_verify():
    assert not verify_password("secret", "not-a-hash")
    assert not verify_password("secret", "10$zz$zz")
    assert not verify_password("secret", None)


def test_hash_with_invalid_iterations_does_not_verify():
    assert not verify_password("secret", "0$aa$bb")
    assert not verify_password("secret", "-5$aa$bb")
