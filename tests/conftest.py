import logging
from datetime import datetime
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def results_dir():
    """Directory for test logs and plots; kept after the run for inspection."""
    base_dir = Path.cwd() / "_test_results"
    base_dir.mkdir(parents=True, exist_ok=True)
    return base_dir


@pytest.fixture(scope="session", autouse=True)
def setup_logging(results_dir):
    """Configure logging for all tests"""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_dir = results_dir / "test_logs"
    log_dir.mkdir(exist_ok=True)

    log_file = log_dir / f"test_run_{timestamp}.log"

    # Console handler with custom formatter
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    )

    # File handler
    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    yield  # Let the tests run

    root_logger.removeHandler(console_handler)
    root_logger.removeHandler(file_handler)
    file_handler.close()
