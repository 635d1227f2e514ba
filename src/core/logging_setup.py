"""
Logging setup for hosts embedding the reconciliation layer.

Library modules log through the module-level loguru ``logger`` and never
configure sinks themselves. A host process calls ``setup_logger`` once.
"""

import sys
from typing import Any, TextIO, Union

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level}</level> | "
    "<cyan>{extra[service]}</cyan> | <white>{message}</white>"
)


def setup_logger(
    service_name: str,
    level: str = "INFO",
    sink: Union[TextIO, Any] = sys.stderr,
) -> int:
    """
    Setup loguru with a human-readable sink and the service name in context.

    Args:
        service_name: Name of the embedding service (e.g., 'vault-contract')
        level: Minimum level for the sink
        sink: Any loguru sink (stream, callable, path)

    Returns:
        Handler id of the added sink
    """
    def patch_record(record):
        record["extra"].setdefault("service", service_name)
        return True

    logger.remove()

    return logger.add(
        sink,
        format=CONSOLE_FORMAT,
        level=level,
        filter=patch_record,
        colorize=False,
        backtrace=False,
        diagnose=False,
    )
