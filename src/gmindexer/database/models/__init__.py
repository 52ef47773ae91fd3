from .accounts import AccountTable, FrenBurnedTable, TransferTable
from .base import Base

__all__ = (
    "AccountTable",
    "Base",
    "FrenBurnedTable",
    "TransferTable",
)
