import pytest

from src.worktrack.worktrack.core.enums import Role
from src.worktrack.worktrack.core.exceptions import DuplicateIdentityError, ValidationError
from src.worktrack.worktrack.users.service import UserService


@pytest.fixture
def service(users_repo, hasher):
    return UserService(users_repo, hasher)


def test_register_stores_hash_and_defaults(service, users_repo, hasher):
    user = service.register(email="alice@x.com", password="pw1", name="Alice")

    stored = users_repo.get_by_email("alice@x.com")
    assert stored == user
    assert user.role == Role.EMPLOYEE
    assert user.department == "General"
    assert user.password_hash != "pw1"
    assert hasher.verify("pw1", user.password_hash)


def test_register_keeps_given_department(service):
    assert service.register(email="a@x.com", password="pw", name="A", department="Eng").department == "Eng"


def test_register_duplicate_email_fails_without_second_row(service, users_repo):
    service.register(email="alice@x.com", password="pw1", name="Alice")

    with pytest.raises(DuplicateIdentityError):
        service.register(email="alice@x.com", password="other", name="Alice 2")

    assert len(users_repo.by_id) == 1


def test_email_is_case_sensitive(service):
    service.register(email="alice@x.com", password="pw1", name="Alice")
    other = service.register(email="Alice@x.com", password="pw1", name="Alice Upper")
    assert other.email == "Alice@x.com"


@pytest.mark.parametrize(
    "email,password,name",
    [("", "pw", "A"), ("a@x.com", "", "A"), ("a@x.com", "pw", "  "), (None, "pw", "A")],
)
def test_register_rejects_missing_fields(service, email, password, name):
    with pytest.raises(ValidationError):
        service.register(email=email, password=password, name=name)


def test_list_team_is_sorted_by_name_and_has_no_hash(service):
    service.register(email="c@x.com", password="pw", name="Charlie")
    service.register(email="a@x.com", password="pw", name="Alice")
    service.register(email="b@x.com", password="pw", name="Bob")

    team = service.list_team()

    assert [u.name for u in team] == ["Alice", "Bob", "Charlie"]
    assert all("password" not in u.to_dict() and "password_hash" not in u.to_dict() for u in team)


def test_ensure_admin_is_idempotent(service, users_repo):
    assert service.ensure_admin(email="admin@worktrack.local", password="admin123") is True
    assert service.ensure_admin(email="admin@worktrack.local", password="admin123") is False

    admins = [u for u in users_repo.by_id.values() if u.email == "admin@worktrack.local"]
    assert len(admins) == 1
    assert admins[0].role == Role.ADMIN


def test_ensure_admin_skips_when_another_admin_exists(service, users_repo):
    service.register(email="boss@x.com", password="pw", name="Boss", role=Role.ADMIN)

    assert service.ensure_admin(email="admin@worktrack.local", password="admin123") is False
    assert users_repo.get_by_email("admin@worktrack.local") is None
    assert users_repo.exists_with_role(Role.ADMIN)


def test_ensure_admin_does_not_take_over_existing_employee_email(service, users_repo):
    service.register(email="admin@worktrack.local", password="pw", name="Not Admin")

    assert service.ensure_admin(email="admin@worktrack.local", password="admin123") is False
    assert users_repo.get_by_email("admin@worktrack.local").role == Role.EMPLOYEE
