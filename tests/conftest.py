#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import logging

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def quiet_package_logger():
    """Restore the package logger after tests that configure CLI logging."""
    package_logger = logging.getLogger("axisfmt")
    level, handlers = package_logger.level, list(package_logger.handlers)
    yield package_logger
    package_logger.setLevel(level)
    package_logger.handlers[:] = handlers
