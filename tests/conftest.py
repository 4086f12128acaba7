from typing import Any

import pytest


def _employees() -> dict[int, dict[str, Any]]:
    return {
        1: {"id": 1, "name": "Nick", "team": "fleet", "admin": True},
        2: {"id": 2, "name": "Steven", "team": "dispatch", "admin": False},
        3: {"id": 3, "name": "Kimani", "team": "fleet", "admin": False},
    }


def _nested() -> dict[str, Any]:
    return {
        "user": {
            "name": {"first": "Nick", "last": "Coronado"},
            "roles": {"view": True, "edit": False},
        },
        "meta": {"version": 2},
    }


@pytest.fixture(scope="function")
def employees() -> dict[int, dict[str, Any]]:
    return _employees()


@pytest.fixture(scope="function")
def employee_list() -> list[dict[str, Any]]:
    return list(_employees().values())


@pytest.fixture(scope="function")
def nested() -> dict[str, Any]:
    return _nested()
