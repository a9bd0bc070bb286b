import logging

import pytest
from sqlalchemy.exc import OperationalError

from lms_backend.database import get_session
from lms_backend.errors import InternalError, NotFound
from lms_backend.logging_utils import OperationBoundary


class BrokenSession:
    def exec(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused: secret-host:3306"))

    def get(self, *args, **kwargs):
        return self.exec()


@pytest.fixture
def broken_store(app):
    app.dependency_overrides[get_session] = lambda: BrokenSession()
    yield
    app.dependency_overrides.clear()


def test_unexpected_error_becomes_internal_error(caplog):
    with caplog.at_level(logging.ERROR, logger="lms_backend"):
        with pytest.raises(InternalError) as excinfo:
            with OperationBoundary("THING_GET"):
                raise RuntimeError("boom")
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert "[THING_GET] boom" in caplog.text


def test_service_errors_pass_through():
    with pytest.raises(NotFound):
        with OperationBoundary("THING_GET"):
            raise NotFound()


@pytest.mark.parametrize("path", ["/api/categories", "/api/stats", "/api/courses/1"])
def test_store_failure_does_not_leak_detail(client, broken_store, caplog, path):
    with caplog.at_level(logging.ERROR, logger="lms_backend"):
        r = client.get(path)
    assert r.status_code == 500
    assert r.json() == {"error": {"code": "INTERNAL_ERROR", "message": "Internal Error"}}
    assert "secret-host" not in r.text
    assert "secret-host" in caplog.text


def test_store_failure_on_authenticated_listing(client, broken_store, auth_headers, caplog):
    with caplog.at_level(logging.ERROR, logger="lms_backend"):
        r = client.get("/api/admin/admins", headers=auth_headers("someone"))
    assert r.status_code == 500
    assert "[ADMINS_GET]" in caplog.text


def test_store_failure_in_admin_guard_is_tagged(client, broken_store, auth_headers, caplog):
    with caplog.at_level(logging.ERROR, logger="lms_backend"):
        r = client.patch("/api/admin/users/1", json={"role": "ADMIN"}, headers=auth_headers("someone"))
    assert r.status_code == 500
    assert r.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "[AUTH_GUARD]" in caplog.text
    assert "secret-host" not in r.text
