from .ss58 import get_ss58_address
from .version import __version__

# isort: split

from .archive import load_blocks, load_blocks_from_file
from .events import (
    BurnedReward,
    Currency,
    EventKind,
    FrenBurnedEvent,
    ParsedEvents,
    QualifiedEventName,
    TransferEvent,
    get_parsed_events_data,
)
from .logging import logger
from .processor import process_batch
from .types import Block, BlockHeader, Event, Extrinsic, Item

__all__ = (
    "Block",
    "BlockHeader",
    "BurnedReward",
    "Currency",
    "Event",
    "EventKind",
    "Extrinsic",
    "FrenBurnedEvent",
    "Item",
    "ParsedEvents",
    "QualifiedEventName",
    "TransferEvent",
    "__version__",
    "get_parsed_events_data",
    "get_ss58_address",
    "load_blocks",
    "load_blocks_from_file",
    "logger",
    "process_batch",
)
