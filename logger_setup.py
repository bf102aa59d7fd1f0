# logger_setup.py
import logging
import sys
from pathlib import Path
from config import LOG_FOLDER, LOG_FILENAME, LOG_ROTATE_BYTES

def setup_global_logger(log_folder=None, verbose=False):
    """
    Configures a global logger that writes to a file and, in verbose mode,
    mirrors every record to stderr.
    """
    log_path = Path(log_folder or LOG_FOLDER) / LOG_FILENAME
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # Rotate the log file if it's too large
    try:
        if log_path.exists() and log_path.stat().st_size > LOG_ROTATE_BYTES:
            log_path.replace(log_path.with_suffix('.log.old'))
    except OSError as e:
        print(f"Could not rotate log file {log_path}: {e}", file=sys.stderr)

    log_format = '%(asctime)s - %(levelname)s - %(module)s.%(funcName)s: %(message)s'
    formatter = logging.Formatter(log_format, '%Y-%m-%d %H:%M:%S')

    # Configure root logger
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    if logger.hasHandlers():
        logger.handlers.clear()

    # File handler; undecodable filename bytes are escaped instead of failing the record
    file_handler = logging.FileHandler(str(log_path), encoding='utf-8', errors='backslashreplace')
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    # stdout carries the command's report, so debug output goes to stderr
    if verbose:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(logging.DEBUG)
        logger.addHandler(console_handler)

    logging.info("Logger initialized.")
    return logger
