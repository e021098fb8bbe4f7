import logging
import warnings
from pathlib import Path

from haunted_radio.config import AppConfig
from haunted_radio.logging_config import LOGGER_NAME, setup_logging


def _build_config(tmp_path: Path) -> AppConfig:
    log_dir = tmp_path / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return AppConfig(
        log_level="WARNING",
        file_log_level="DEBUG",
        log_dir=str(log_dir),
        log_file=str(log_dir / "radio.log"),
        audio_root=str(tmp_path / "audio"),
    )


def _close_handlers():
    for name in (LOGGER_NAME, "py.warnings"):
        target = logging.getLogger(name)
        for handler in list(target.handlers):
            target.removeHandler(handler)
            handler.close()
    logging.captureWarnings(False)


def test_setup_logging_replaces_handlers(tmp_path):
    config = _build_config(tmp_path)
    try:
        logger = setup_logging(config)
        logger_again = setup_logging(config)

        assert logger is logger_again
        assert logger.name == "haunted_radio"
        assert len(logger.handlers) == 2
        assert Path(config.log_file).exists()
        levels = sorted(handler.level for handler in logger.handlers)
        assert levels == [logging.DEBUG, logging.WARNING]
    finally:
        _close_handlers()


def test_file_log_records_thread_and_warnings(tmp_path):
    config = _build_config(tmp_path)
    try:
        logger = setup_logging(config)
        logger.debug("segment %s for %sms", "main", 4200)
        warnings.showwarning("radio interference", UserWarning, __file__, 1)
        for handler in logger.handlers:
            handler.flush()
        text = Path(config.log_file).read_text(encoding="utf-8")
    finally:
        _close_handlers()

    assert "segment main for 4200ms" in text
    assert "MainThread" in text
    assert "radio interference" in text
