"""Data models for the users API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _text(data: dict, key: str) -> str:
    """Read a string field; missing or null becomes an empty string."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


def _integer(data: dict, key: str) -> int:
    """Read an integer field; missing or null becomes 0."""
    value = data.get(key)
    if value is None:
        return 0
    # bool is a subclass of int but never a valid number here
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"field {key!r} must be an integer, got {type(value).__name__}")
    return value


def _object(data: dict, key: str) -> dict:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(f"field {key!r} must be an object, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Company:
    """Employer details embedded in a user record."""

    name: str = ""
    department: str = ""
    title: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> Company:
        return cls(
            name=_text(data, "name"),
            department=_text(data, "department"),
            title=_text(data, "title"),
        )

    def to_dict(self) -> dict:
        return {"name": self.name, "department": self.department, "title": self.title}


@dataclass(frozen=True)
class User:
    """A single user record as returned by the API."""

    id: int
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    username: str = ""
    age: int = 0
    gender: str = ""
    company: Company = field(default_factory=Company)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_dict(cls, data: dict | None) -> User:
        """Create a User from its JSON object, ignoring unknown keys.

        A null entry becomes a zero-value User.
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise TypeError(f"user must be an object, got {type(data).__name__}")
        return cls(
            id=_integer(data, "id"),
            first_name=_text(data, "firstName"),
            last_name=_text(data, "lastName"),
            email=_text(data, "email"),
            phone=_text(data, "phone"),
            username=_text(data, "username"),
            age=_integer(data, "age"),
            gender=_text(data, "gender"),
            company=Company.from_dict(_object(data, "company")),
        )

    def to_dict(self) -> dict:
        """Convert the User back to its JSON object (camelCase keys)."""
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "phone": self.phone,
            "username": self.username,
            "age": self.age,
            "gender": self.gender,
            "company": self.company.to_dict(),
        }


@dataclass(frozen=True)
class UsersResponse:
    """One page of users plus the pagination metadata reported by the server.

    ``limit`` echoes the request and may differ from ``len(users)``.
    """

    users: tuple[User, ...] = ()
    total: int = 0
    skip: int = 0
    limit: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> UsersResponse:
        """Create a UsersResponse from the decoded response body.

        Raises:
            TypeError: If the payload does not have the expected shape.
        """
        if not isinstance(data, dict):
            raise TypeError(f"response must be an object, got {type(data).__name__}")
        raw_users = data.get("users")
        if raw_users is None:
            raw_users = []
        if not isinstance(raw_users, list):
            raise TypeError(f"field 'users' must be an array, got {type(raw_users).__name__}")
        return cls(
            users=tuple(User.from_dict(item) for item in raw_users),
            total=_integer(data, "total"),
            skip=_integer(data, "skip"),
            limit=_integer(data, "limit"),
        )

    def to_dict(self) -> dict:
        return {
            "users": [user.to_dict() for user in self.users],
            "total": self.total,
            "skip": self.skip,
            "limit": self.limit,
        }
