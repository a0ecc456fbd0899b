from __future__ import annotations

import logging
from pathlib import Path

from profilekit.core.stdlib_logging import configure_logging, reset_logging_for_tests


def _installed() -> list:
    return [h for h in logging.getLogger().handlers if getattr(h, "_profilekit_handler", False)]


def test_configure_logging_is_idempotent() -> None:
    configure_logging(level="INFO")
    configure_logging(level="DEBUG")

    assert len(_installed()) == 1
    assert logging.getLogger().level == logging.DEBUG


def test_log_file_receives_records(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "profilekit.log"
    configure_logging(level="debug", log_path=log_path)

    logging.getLogger("profilekit.test").debug("probe %s", "ok")
    for handler in _installed():
        handler.flush()

    assert "probe ok" in log_path.read_text(encoding="utf-8")


def test_unknown_level_falls_back_to_warning() -> None:
    configure_logging(level="chatty")

    assert logging.getLogger().level == logging.WARNING


def test_reset_removes_only_own_handlers() -> None:
    foreign = logging.NullHandler()
    root = logging.getLogger()
    root.addHandler(foreign)
    try:
        configure_logging()
        reset_logging_for_tests()

        assert _installed() == []
        assert foreign in root.handlers
    finally:
        root.removeHandler(foreign)
