import logging
import logging.handlers

from app import LauncherApp
import config, web_remote


def file_handler(path: str) -> logging.Handler:
    """Size-capped runtime log (the web remote serves the current file)."""
    return logging.handlers.RotatingFileHandler(
        path,
        maxBytes=getattr(config, "LOG_MAX_BYTES", 1_000_000),
        backupCount=getattr(config, "LOG_BACKUPS", 3),
        encoding="utf-8",
    )


def setup_logging():
    handlers = [logging.StreamHandler()]
    log_file = getattr(config, "LOG_FILE", "")
    if log_file:
        handlers.append(file_handler(log_file))
    logging.basicConfig(level=getattr(config, "LOG_LEVEL", logging.INFO),
                        format=getattr(config, "LOG_FORMAT", logging.BASIC_FORMAT),
                        handlers=handlers)


def main():
    setup_logging()
    app = LauncherApp()
    if getattr(config, "WEB_REMOTE", False):
        web_remote.start(app)
    app.run()

if __name__ == "__main__":
    main()
