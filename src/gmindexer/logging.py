"""
Package logger. Records go to stderr prefixed with their level, and do not reach the root logger.
"""

import logging

logger = logging.getLogger("gmindexer")
logger.propagate = False
logger.setLevel(logging.INFO)

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
logger.addHandler(_handler)
