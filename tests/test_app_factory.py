from __future__ import annotations

import atexit
import gc
import weakref

from attendance_tracker import create_app, get_container


def _make_app(tmp_path, monkeypatch, name):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app({"DATABASE_PATH": str(tmp_path / name), "LOG_LEVEL": "WARNING"})


def test_create_app_does_not_register_exit_hooks(tmp_path, monkeypatch):
    registered = []
    monkeypatch.setattr(atexit, "register", registered.append)

    for i in range(3):
        get_container(_make_app(tmp_path, monkeypatch, f"app{i}.db")).close()

    assert registered == []


def test_finished_app_container_can_be_collected(tmp_path, monkeypatch):
    app = _make_app(tmp_path, monkeypatch, "gc.db")
    container = get_container(app)
    container.close()
    ref = weakref.ref(container)

    del app, container
    gc.collect()

    assert ref() is None
