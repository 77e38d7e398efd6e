"""
Logging Configuration for Flask App
====================================

Configure logging to both console and file with rotation.
"""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path


def setup_logging(app):
    """
    Setup logging for Flask application.

    Logs will be written to:
    - Console (stderr) - warnings and above
    - File (<LOG_DIR>/app.log) - for persistence, unless LOG_TO_FILE is off

    File rotation:
    - Max size: 10MB per file
    - Backup count: 5 files
    """
    # Set log level based on environment
    log_level = logging.DEBUG if app.debug else logging.INFO
    log_level_console = logging.WARNING

    # Create formatters
    detailed_formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s in %(module)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    simple_formatter = logging.Formatter(
        '%(levelname)s - %(message)s'
    )

    # Configure root logger (for ALL modules including Flask app)
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    log_file = None
    if app.config.get("LOG_TO_FILE", True):
        log_dir = Path(app.config.get("LOG_DIR", "logs"))
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "app.log"

        # delay=True defers opening the file until the first record
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8',
            delay=True
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level_console)
    console_handler.setFormatter(simple_formatter)
    root_logger.addHandler(console_handler)

    # Configure Flask app logger (but don't add handlers - use root logger's)
    app.logger.setLevel(log_level)
    app.logger.propagate = True

    # Log startup message
    app.logger.info("=" * 60)
    if log_file:
        app.logger.info(f"Flask app started - Logging to {log_file}")
    else:
        app.logger.info("Flask app started - File logging disabled")
    app.logger.info(f"Log level: {logging.getLevelName(log_level)}")
    app.logger.info("=" * 60)

    return app
