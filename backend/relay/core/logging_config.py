# backend/relay/core/logging_config.py
# Shared by the relay and the review portal; each passes its own log file and noisy loggers.

import logging
import logging.config
import os

RELAY_QUIET_LOGGERS = {
    'uvicorn.access': 'WARNING',
}


def build_logging_config(log_file_path: str, level: str = 'INFO', quiet_loggers: dict = None) -> dict:
    """
    dictConfig for stdout plus a 5 MB x 5 rotating file.
    Loggers in ``quiet_loggers`` keep both handlers but only emit at the given level.
    """
    handler_names = ['console', 'rotating_file']
    loggers = {'': {'handlers': handler_names, 'level': level}}
    for name, quiet_level in (quiet_loggers or {}).items():
        loggers[name] = {'handlers': handler_names, 'level': quiet_level, 'propagate': False}

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'default': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'default',
                'level': level,
                'stream': 'ext://sys.stdout',
            },
            'rotating_file': {
                'class': 'logging.handlers.RotatingFileHandler',
                'formatter': 'default',
                'level': level,
                'filename': log_file_path,
                'maxBytes': 1024 * 1024 * 5,
                'backupCount': 5,
                'encoding': 'utf-8',
            },
        },
        'loggers': loggers,
    }


def configure_file_logging(log_dir: str, file_name: str, quiet_loggers: dict = None) -> str:
    """Creates ``log_dir`` if needed, applies the config and returns the log file path."""
    os.makedirs(log_dir, exist_ok=True)
    log_file_path = os.path.join(log_dir, file_name)
    level = os.getenv('LOG_LEVEL', 'INFO').upper()
    logging.config.dictConfig(build_logging_config(log_file_path, level, quiet_loggers))
    logging.getLogger().info(f"Logging initialized at {level}, file: {log_file_path}")
    return log_file_path


def setup_logging(log_dir: str = None) -> str:
    """Relay logging, written under backend/logs/."""
    if log_dir is None:
        log_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', '..', 'logs')
    return configure_file_logging(log_dir, 'designflow_relay.log', RELAY_QUIET_LOGGERS)
