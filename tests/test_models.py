import pytest

from usercli.models import Company, User, UsersResponse


def test_from_dict_reads_camel_case_fields():
    user = User.from_dict(
        {
            "id": 5,
            "firstName": "Emily",
            "lastName": "Johnson",
            "email": "emily.johnson@x.dummyjson.com",
            "phone": "+81 965-431-3024",
            "username": "emilys",
            "age": 28,
            "gender": "female",
            "company": {
                "name": "Dooley, Kozey and Cronin",
                "department": "Engineering",
                "title": "Sales Manager",
                "address": {"city": "Phoenix"},
            },
            "eyeColor": "Green",
        }
    )
    assert user.first_name == "Emily"
    assert user.last_name == "Johnson"
    assert user.age == 28
    assert user.company == Company(
        name="Dooley, Kozey and Cronin", department="Engineering", title="Sales Manager"
    )


def test_missing_fields_default_to_zero_values():
    user = User.from_dict({"id": 3, "firstName": None})
    assert user == User(id=3)
    assert user.company.name == ""
    assert user.age == 0


def test_users_response_keeps_order_and_metadata():
    resp = UsersResponse.from_dict(
        {
            "users": [{"id": 9}, {"id": 2}, {"id": 5}],
            "total": 208,
            "skip": 30,
            "limit": 3,
        }
    )
    assert [u.id for u in resp.users] == [9, 2, 5]
    assert (resp.total, resp.skip, resp.limit) == (208, 30, 3)


def test_users_response_missing_users():
    resp = UsersResponse.from_dict({"total": 0})
    assert resp.users == ()


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"users": {}},
        {"users": [1]},
        {"users": [{"id": "one"}]},
        {"users": [{"id": 1, "age": True}]},
        {"users": [{"id": 1, "email": 42}]},
        {"users": [{"id": 1, "company": "Acme"}]},
        {"total": "208"},
    ],
)
def test_schema_mismatch_raises_type_error(payload):
    with pytest.raises(TypeError):
        UsersResponse.from_dict(payload)


def test_models_are_immutable():
    user = User(id=1)
    with pytest.raises(AttributeError):
        user.first_name = "changed"


def test_to_dict_wire_shape():
    resp = UsersResponse(users=(User(id=1, first_name="A"),), total=1, limit=10)
    assert resp.to_dict() == {
        "users": [
            {
                "id": 1,
                "firstName": "A",
                "lastName": "",
                "email": "",
                "phone": "",
                "username": "",
                "age": 0,
                "gender": "",
                "company": {"name": "", "department": "", "title": ""},
            }
        ],
        "total": 1,
        "skip": 0,
        "limit": 10,
    }


def test_null_user_entry_becomes_zero_value_user():
    resp = UsersResponse.from_dict({"users": [None, {"id": 4}], "total": 2})
    assert resp.users == (User(id=0), User(id=4))
