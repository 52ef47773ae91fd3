"""
Canonical event records.

Records are independent of the module and payload version that produced them. They are built once
per matched chain item and never modified afterwards.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar

from gmindexer.events.names import BurnedReward, Currency, EventKind
from gmindexer.types.aliases import BlockNumber, EventId, Ss58Address


@dataclass(frozen=True, slots=True)
class TransferEvent:
    id: EventId
    block_number: BlockNumber
    currency_id: Currency
    timestamp: datetime
    extrinsic_hash: str | None
    from_: Ss58Address
    to: Ss58Address
    amount: int
    fee: int = 0

    kind: ClassVar[EventKind] = EventKind.TRANSFER

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize the record. The `extrinsic_hash` key is left out entirely when the transfer was not
        triggered by an extrinsic.
        """

        record: dict[str, Any] = {
            "id": self.id,
            "block_number": self.block_number,
            "currency_id": self.currency_id.value,
            "timestamp": self.timestamp,
            "from": self.from_,
            "to": self.to,
            "amount": self.amount,
            "fee": self.fee,
        }
        if self.extrinsic_hash is not None:
            record["extrinsic_hash"] = self.extrinsic_hash
        return record

    @property
    def account_ids(self) -> tuple[Ss58Address, ...]:
        return (self.from_, self.to)


@dataclass(frozen=True, slots=True)
class FrenBurnedEvent:
    id: EventId
    block_number: BlockNumber
    timestamp: datetime
    extrinsic_hash: str | None
    account: Ss58Address
    burned_amount: int
    burned_for: BurnedReward | None

    kind: ClassVar[EventKind] = EventKind.FREN_BURNED

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize the record. `burned_for` is always present and is `None` when the burn granted no
        reward.
        """

        record: dict[str, Any] = {
            "id": self.id,
            "block_number": self.block_number,
            "timestamp": self.timestamp,
            "account": self.account,
            "burned_amount": self.burned_amount,
            "burned_for": None if self.burned_for is None else self.burned_for.value,
        }
        if self.extrinsic_hash is not None:
            record["extrinsic_hash"] = self.extrinsic_hash
        return record

    @property
    def account_ids(self) -> tuple[Ss58Address, ...]:
        return (self.account,)


type CanonicalRecord = TransferEvent | FrenBurnedEvent
