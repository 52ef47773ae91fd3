from collections.abc import Iterator

from gmindexer.events.names import EventKind
from gmindexer.events.records import CanonicalRecord, FrenBurnedEvent, TransferEvent
from gmindexer.logging import logger
from gmindexer.types.aliases import EventId, Ss58Address


class ParsedEvents:
    """
    Canonical records of one batch, grouped by kind.

    Within a kind, records are keyed by event ID and kept in the order they were first added, which
    is chain order when fed by a batch pass. A second record with an ID already present is dropped.
    """

    def __init__(self) -> None:
        self._records: dict[EventKind, dict[EventId, CanonicalRecord]] = {
            kind: {} for kind in EventKind
        }
        self.account_ids: set[Ss58Address] = set()

    def add(self, record: CanonicalRecord) -> bool:
        """
        Add a record under its kind. Returns False if a record with the same ID was already added.
        """

        records = self._records[record.kind]
        if record.id in records:
            logger.debug(f"Dropped duplicate {record.kind.value} record {record.id}")
            return False

        records[record.id] = record
        self.account_ids.update(record.account_ids)
        return True

    def get(self, kind: EventKind) -> list[CanonicalRecord]:
        return list(self._records[kind].values())

    @property
    def transfers(self) -> list[TransferEvent]:
        return [
            record
            for record in self._records[EventKind.TRANSFER].values()
            if isinstance(record, TransferEvent)
        ]

    @property
    def fren_burned(self) -> list[FrenBurnedEvent]:
        return [
            record
            for record in self._records[EventKind.FREN_BURNED].values()
            if isinstance(record, FrenBurnedEvent)
        ]

    def __contains__(self, event_id: object) -> bool:
        return any(event_id in records for records in self._records.values())

    def __iter__(self) -> Iterator[EventKind]:
        return iter(self._records)

    def __len__(self) -> int:
        return sum(len(records) for records in self._records.values())

    def __repr__(self) -> str:
        counts = ", ".join(f"{kind.value}={len(records)}" for kind, records in self._records.items())
        return f"{self.__class__.__name__}({counts})"
