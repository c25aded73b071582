from logging.handlers import RotatingFileHandler

from transformview.view import add_file_handler, logger


def test_import_opens_no_log_file() -> None:
    assert not any(isinstance(h, RotatingFileHandler) for h in logger.handlers)


def test_add_file_handler_writes_to_path(tmp_path) -> None:
    path = tmp_path / "view.log"
    handler = add_file_handler(str(path))
    try:
        assert handler in logger.handlers
        logger.warning("zoom rejected")
        handler.flush()
        assert "zoom rejected" in path.read_text()
    finally:
        logger.removeHandler(handler)
        handler.close()
