from dataclasses import dataclass
from typing import Final

from gmindexer.events.names import EventKind, QualifiedEventName
from gmindexer.types.chain import Item


@dataclass(frozen=True, slots=True)
class Extraction:
    """Decision to extract a record of `kind` from an item named `name`."""

    name: QualifiedEventName
    kind: EventKind


# Recognized names mapped to the kind of record they produce. `Tokens.Endowed` is recognized but
# deliberately produces no record.
EXTRACTION_RULES: Final[dict[QualifiedEventName, EventKind | None]] = {
    QualifiedEventName.TOKENS_ENDOWED: None,
    QualifiedEventName.TOKENS_TRANSFER: EventKind.TRANSFER,
    QualifiedEventName.BALANCES_TRANSFER: EventKind.TRANSFER,
    QualifiedEventName.CURRENCIES_FREN_BURNED: EventKind.FREN_BURNED,
}

_NAMES_BY_VALUE: Final[dict[str, QualifiedEventName]] = {
    name.value: name for name in QualifiedEventName
}


def classify(item: Item) -> Extraction | None:
    """
    Decide whether an item should be extracted, based only on its qualified event name.

    Returns None for unrecognized names and for recognized names that produce no record.
    """

    name = _NAMES_BY_VALUE.get(item.name)
    if name is None:
        return None

    kind = EXTRACTION_RULES[name]
    if kind is None:
        return None

    return Extraction(name=name, kind=kind)
