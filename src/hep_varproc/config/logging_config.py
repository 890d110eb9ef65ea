import logging

# Add custom PROGRESS log level (between INFO=20 and WARNING=30)
PROGRESS_LEVEL = 25
logging.addLevelName(PROGRESS_LEVEL, "PROGRESS")


def progress(self, message, *args, **kwargs):
    """Log a progress message at PROGRESS level."""
    if self.isEnabledFor(PROGRESS_LEVEL):
        self._log(PROGRESS_LEVEL, message, args, **kwargs)


# Add the progress method to Logger class
logging.Logger.progress = progress


def setup_logging(level=logging.INFO, log_file=None):
    """Setup logging configuration for the entire package

    Note: matplotlib is noisy at DEBUG level (font manager lookups), so its
    logger is pinned to WARNING regardless of the requested level.
    """
    logging.getLogger("matplotlib").setLevel(logging.WARNING)

    # Create formatter
    if level == logging.DEBUG:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    else:
        formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")

    # Create handlers
    handlers = []

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    # File handler (optional)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Add our handlers
    for handler in handlers:
        root_logger.addHandler(handler)

    return root_logger


def get_logger(name):
    """Get a logger for a module"""
    return logging.getLogger(name)


def parse_log_level(level) -> int:
    """Turn a level name like "debug" or "PROGRESS" (or an int) into a logging level."""
    if isinstance(level, int):
        return level
    name = str(level).strip().upper()
    if name == "PROGRESS":
        return PROGRESS_LEVEL
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved
