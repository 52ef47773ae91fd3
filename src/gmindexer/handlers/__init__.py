"""Persistence handlers that turn canonical records into stored entities."""

from .account import get_or_create_account
from .fren_burned import handle_fren_burned
from .transfer import handle_transfers

__all__ = (
    "get_or_create_account",
    "handle_fren_burned",
    "handle_transfers",
)
