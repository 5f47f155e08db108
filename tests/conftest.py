"""Test configuration for pytest."""

import logging
import os
import pytest


@pytest.fixture(autouse=True, scope="session")
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    os.environ['UNEMPTY_LOG_LEVEL'] = 'WARNING'

    logging.getLogger().setLevel(logging.WARNING)

    # Growth and consumption log at DEBUG; keep them out of test output
    for logger_name in ['unempty.backing', 'unempty.vec']:
        logging.getLogger(logger_name).setLevel(logging.ERROR)
