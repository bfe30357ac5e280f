import configparser
import io
import logging

import pytest

import server


def _logging_config(**values):
    cfg = configparser.ConfigParser()
    cfg.read_dict({"LOGGING": {key: str(value) for key, value in values.items()}})
    return cfg


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    detail = logging.getLogger("detail")
    saved = [(lg, lg.handlers[:], lg.level, lg.propagate) for lg in (root, detail)]
    yield
    for lg, handlers, level, propagate in saved:
        for handler in lg.handlers[:]:
            lg.removeHandler(handler)
            if handler not in handlers:
                handler.close()
        for handler in handlers:
            lg.addHandler(handler)
        lg.setLevel(level)
        lg.propagate = propagate


def test_detail_logger_writes_to_rotating_file(tmp_path, restore_logging):
    log_file = tmp_path / "logs" / "suggestions.log"
    file_handler = server.configure_logging(_logging_config(
        log_queries=1,
        file_enabled=1,
        file_path=log_file,
        file_max_bytes=2048,
        file_backup_count=2,
    ))
    assert file_handler is not None
    assert file_handler.maxBytes == 2048
    assert file_handler.backupCount == 2

    detail = logging.getLogger("detail")
    assert detail.propagate is False
    detail.info("Vorschlagssuche 'baño': 8 Treffer")
    file_handler.flush()
    assert "Vorschlagssuche 'baño': 8 Treffer" in log_file.read_text(encoding="utf-8")


def test_detail_logger_silent_without_log_queries(tmp_path, restore_logging):
    log_file = tmp_path / "suggestions.log"
    server.configure_logging(_logging_config(log_queries=0, file_enabled=1, file_path=log_file))

    detail = logging.getLogger("detail")
    assert not detail.isEnabledFor(logging.INFO)
    detail.info("Vorschlagssuche 'lavabo': 3 Treffer")
    detail.warning("Katalog leer")
    text = log_file.read_text(encoding="utf-8")
    assert "lavabo" not in text
    assert "Katalog leer" in text


def test_file_logging_disabled_by_default(restore_logging):
    assert server.configure_logging(_logging_config(console_level="DEBUG")) is None
    assert logging.getLogger().level == logging.DEBUG
    assert not any(
        isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers
    )


def test_stream_handler_replaces_unencodable_characters():
    stream = io.TextIOWrapper(io.BytesIO(), encoding="ascii")
    handler = server.SafeEncodingStreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.emit(logging.makeLogRecord({"msg": "Baño", "levelno": logging.INFO}))
    stream.seek(0)
    assert stream.read() == "Ba?o\n"
