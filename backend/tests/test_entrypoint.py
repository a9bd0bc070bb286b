from lms_backend import __main__ as entrypoint
from lms_backend.config import Settings


def test_main_serves_app_factory(monkeypatch):
    calls = []
    monkeypatch.setattr(entrypoint, "get_settings", lambda: Settings(server_host="0.0.0.0", server_port=9001))
    monkeypatch.setattr(entrypoint.uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))

    entrypoint.main()

    assert calls == [
        (
            "lms_backend.main:create_app",
            {"factory": True, "host": "0.0.0.0", "port": 9001, "log_level": "info"},
        )
    ]
