"""Lambda entry points, one module per route."""

from ...config import settings
from ...infrastructure.logging import configure_logging

configure_logging(settings.service_name, settings.log_level)
