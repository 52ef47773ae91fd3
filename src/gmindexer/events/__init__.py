from .aggregator import ParsedEvents
from .batch import get_parsed_events_data
from .classifier import Extraction, classify
from .names import BurnedReward, Currency, EventKind, QualifiedEventName
from .normalizer import normalize_item
from .records import CanonicalRecord, FrenBurnedEvent, TransferEvent

__all__ = (
    "BurnedReward",
    "CanonicalRecord",
    "Currency",
    "EventKind",
    "Extraction",
    "FrenBurnedEvent",
    "ParsedEvents",
    "QualifiedEventName",
    "TransferEvent",
    "classify",
    "get_parsed_events_data",
    "normalize_item",
)
