import logging

import pytest
import structlog

from ts_type_graph.config import get_type_graph_settings


@pytest.fixture(autouse=True)
def reset_logging_and_settings():
    get_type_graph_settings.cache_clear()
    yield
    get_type_graph_settings.cache_clear()
    structlog.reset_defaults()
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
