from gmindexer.exceptions.base import GmIndexerError, GmIndexerTypeError, GmIndexerValueError
from gmindexer.exceptions.database import BackupExists
from gmindexer.exceptions.normalization import (
    MalformedAddressError,
    MalformedPayloadError,
    NormalizationError,
    UnrecognizedTagError,
    UnsupportedPayloadVersion,
)

from . import database, normalization

__all__ = (
    "BackupExists",
    "GmIndexerError",
    "GmIndexerTypeError",
    "GmIndexerValueError",
    "MalformedAddressError",
    "MalformedPayloadError",
    "NormalizationError",
    "UnrecognizedTagError",
    "UnsupportedPayloadVersion",
    "database",
    "normalization",
)
