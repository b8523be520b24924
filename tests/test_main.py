import logging
import logging.handlers

import main


def test_runtime_log_rotates(tmp_path, monkeypatch):
    monkeypatch.setattr(main.config, "LOG_MAX_BYTES", 200)
    monkeypatch.setattr(main.config, "LOG_BACKUPS", 2)
    log_file = tmp_path / "runtime.log"

    handler = main.file_handler(str(log_file))
    assert isinstance(handler, logging.handlers.RotatingFileHandler)

    logger = logging.getLogger("rotation-check")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    try:
        for i in range(50):
            logger.debug("line %03d padding padding padding", i)
    finally:
        logger.removeHandler(handler)
        handler.close()

    assert log_file.stat().st_size <= 200
    assert (tmp_path / "runtime.log.1").exists()
    assert (tmp_path / "runtime.log.2").exists()
    assert not (tmp_path / "runtime.log.3").exists()
