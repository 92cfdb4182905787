import os
import logging
from logging.handlers import RotatingFileHandler

EVENTS_LEVEL_NUM = 38
DEFAULT_LOG_BACKUP_COUNT = 10


def setup_events_logger(full_path, events_retention_size, network_id=None):
    """
    Setup data-quality events logger with optional network ID in filename.

    Args:
        full_path: Base directory for log files
        events_retention_size: Maximum size of log files before rotation
        network_id: Optional network ID to include in filename (default: None)
    """
    logging.addLevelName(EVENTS_LEVEL_NUM, "EVENT")

    logger = logging.getLogger("event")
    logger.setLevel(EVENTS_LEVEL_NUM)

    def event(self, message, *args, **kws):
        if self.isEnabledFor(EVENTS_LEVEL_NUM):
            self._log(EVENTS_LEVEL_NUM, message, args, **kws)

    logging.Logger.event = event

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    os.makedirs(full_path, exist_ok=True)
    log_filename = f"events_network_{network_id}.log" if network_id is not None else "events.log"
    log_path = os.path.join(full_path, log_filename)

    # Re-running setup in one process must not duplicate handlers
    for handler in logger.handlers:
        if getattr(handler, "baseFilename", None) == os.path.abspath(log_path):
            return logger

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=events_retention_size,
        backupCount=DEFAULT_LOG_BACKUP_COUNT,
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(EVENTS_LEVEL_NUM)
    logger.addHandler(file_handler)

    return logger


DUPLICATE_ACCOUNT_EVENT = "duplicate_account"
BELOW_THRESHOLD_EVENT = "below_threshold"
EVENT_FIELD_SEPARATOR = " | "


def format_event(kind, *fields):
    """Join an event kind and its fields into one log line."""
    return EVENT_FIELD_SEPARATOR.join([kind, *(str(f) for f in fields)])


def record_duplicate_account(logger, normalized_account, raw_account):
    """Record a case-variant account that was dropped in favour of an earlier one."""
    logger.event(format_event(DUPLICATE_ACCOUNT_EVENT, normalized_account, raw_account))


def record_below_threshold(logger, account, weighted_score, min_weight):
    """Record an account dropped for scoring below the inclusion threshold."""
    logger.event(format_event(BELOW_THRESHOLD_EVENT, account, weighted_score, min_weight))
