"""Package logger.

Library code never configures handlers; applications opt in with
``logging.getLogger("physunits").setLevel(logging.DEBUG)`` and their own
handler.
"""

import logging

logger = logging.getLogger("physunits")
logger.addHandler(logging.NullHandler())

__all__ = ["logger"]
