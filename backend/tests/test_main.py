import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

import main


def _file_handlers(log_file):
    return [
        handler for handler in logging.getLogger().handlers
        if isinstance(handler, RotatingFileHandler)
        and handler.baseFilename == os.path.abspath(log_file)
    ]


def test_importing_main_installs_rotating_log_file():
    data_dir = Path(os.environ['COURSEHUB_DATA_DIR'])

    assert main.LOG_FILE == data_dir / "logs" / "backend.log"
    assert len(_file_handlers(main.LOG_FILE)) == 1
    assert main.LOG_FILE.exists()


def test_configure_logging_is_idempotent():
    before = list(logging.getLogger().handlers)

    assert main.configure_logging() == main.LOG_FILE
    assert logging.getLogger().handlers == before


def test_configure_logging_follows_data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv('COURSEHUB_DATA_DIR', str(tmp_path))
    root = logging.getLogger()
    before = list(root.handlers)

    log_file = main.configure_logging()
    try:
        assert log_file == tmp_path / "logs" / "backend.log"
        assert len(_file_handlers(log_file)) == 1
        logging.getLogger("services.item_info_service").info("item lookup")
        for handler in root.handlers:
            handler.flush()
        assert "item lookup" in log_file.read_text(encoding='utf-8')
    finally:
        for handler in root.handlers[len(before):]:
            root.removeHandler(handler)
            handler.close()
