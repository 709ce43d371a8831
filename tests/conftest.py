"""Root test configuration: keep docstore logging disabled between tests"""

import pytest

from docstore.config import Settings
from docstore.log import configure_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any sink or enable() a test leaves behind."""
    yield
    configure_logging(Settings())
