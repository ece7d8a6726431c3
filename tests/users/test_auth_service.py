import pytest

from src.worktrack.worktrack.core.enums import Role
from src.worktrack.worktrack.core.exceptions import AuthenticationError
from src.worktrack.worktrack.users.model import User


@pytest.fixture
def auth(container):
    return container.auth_service


def test_register_then_login_returns_token_for_same_user(auth, container):
    registered = auth.register(email="alice@x.com", password="pw1", name="Alice", department="Eng")
    logged_in = auth.login("alice@x.com", "pw1")

    claim = container.tokens.verify(logged_in.token)
    assert claim is not None
    assert claim.id == registered.user.id
    assert claim.email == "alice@x.com"
    assert claim.role == Role.EMPLOYEE
    assert claim.department == "Eng"
    assert logged_in.user == registered.user


def test_login_unknown_email_is_invalid_credentials(auth):
    with pytest.raises(AuthenticationError) as exc:
        auth.login("nobody@x.com", "pw")
    assert str(exc.value) == "Invalid email or password"


def test_login_wrong_password_is_invalid_credentials(auth):
    auth.register(email="alice@x.com", password="pw1", name="Alice")
    with pytest.raises(AuthenticationError) as exc:
        auth.login("alice@x.com", "nope")
    assert str(exc.value) == "Invalid email or password"


def test_login_with_corrupt_stored_hash_does_not_crash(auth, users_repo):
    users_repo.by_id[99] = User(
        id=99,
        email="broken@x.com",
        password_hash="CHANGE_ME",
        name="Broken",
        role=Role.EMPLOYEE,
        department="Eng",
    )
    with pytest.raises(AuthenticationError):
        auth.login("broken@x.com", "anything")


@pytest.mark.parametrize("email,password", [(None, "pw"), ("a@x.com", None), ("", "pw"), (123, "pw")])
def test_login_rejects_missing_input(auth, email, password):
    with pytest.raises(AuthenticationError):
        auth.login(email, password)


def test_auth_result_serializes_public_user(auth):
    body = auth.register(email="alice@x.com", password="pw1", name="Alice").to_dict()
    assert set(body) == {"token", "user"}
    assert body["user"] == {
        "id": 1,
        "email": "alice@x.com",
        "name": "Alice",
        "role": "employee",
        "department": "General",
    }
