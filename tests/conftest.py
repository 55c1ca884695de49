import pytest

from usercli.models import Company, User, UsersResponse


@pytest.fixture
def john():
    return User(
        id=1,
        first_name="John",
        last_name="Doe",
        email="john@example.com",
        phone="+1234567890",
        username="johnd",
        age=30,
        gender="male",
        company=Company(name="Acme", department="Engineering", title="Developer"),
    )


@pytest.fixture
def jane():
    return User(
        id=2,
        first_name="Jane",
        last_name="Smith",
        email="jane@example.com",
        phone="+1987654321",
        username="janes",
        age=28,
        gender="female",
    )


@pytest.fixture
def users_resp(john, jane):
    return UsersResponse(users=(john, jane), total=208, skip=0, limit=10)
