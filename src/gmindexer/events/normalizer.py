"""
Builds canonical records from matched chain items.

Payload decoding is delegated to the versioned decoders; this module only derives the fields that
are common to every payload version: identity, block height, timestamp, extrinsic hash, fee, and
SS58 addresses.
"""

from datetime import UTC, datetime, timedelta

from gmindexer.constants import GMORDIE_SS58_PREFIX
from gmindexer.events.classifier import Extraction
from gmindexer.events.decoders import (
    BalancesTransferPayload,
    FrenBurnedPayload,
    PayloadDecoderFactory,
    TokensTransferPayload,
)
from gmindexer.events.names import Currency
from gmindexer.events.records import CanonicalRecord, FrenBurnedEvent, TransferEvent
from gmindexer.exceptions import GmIndexerTypeError, MalformedPayloadError
from gmindexer.ss58 import get_ss58_address
from gmindexer.types.chain import Block, Item

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def get_block_timestamp(block: Block) -> datetime:
    return _EPOCH + timedelta(milliseconds=block.header.timestamp)


def get_extrinsic_hash(item: Item) -> str | None:
    extrinsic = item.event.extrinsic
    return None if extrinsic is None else extrinsic.hash


def get_extrinsic_fee(item: Item) -> int:
    """
    Fee paid by the originating extrinsic, zero if the event was not triggered by one or the fee
    was not reported.
    """

    extrinsic = item.event.extrinsic
    if extrinsic is None or extrinsic.fee is None:
        return 0
    if extrinsic.fee < 0:
        raise MalformedPayloadError(item.event.id, "fee", f"is negative: {extrinsic.fee}")
    return extrinsic.fee


def normalize_item(
    item: Item,
    block: Block,
    extraction: Extraction,
    ss58_prefix: int = GMORDIE_SS58_PREFIX,
) -> CanonicalRecord:
    """
    Produce exactly one canonical record for a matched item.

    Raises a `NormalizationError` subclass if the payload cannot be turned into a valid record.
    """

    decoder = PayloadDecoderFactory.get_decoder(extraction.name, block.header.spec_version)
    payload = decoder.decode(item.event.id, item.event.args)

    match payload:
        case TokensTransferPayload() | BalancesTransferPayload():
            return TransferEvent(
                id=item.event.id,
                block_number=block.header.height,
                # Balances module only moves the native token
                currency_id=(
                    payload.currency_id
                    if isinstance(payload, TokensTransferPayload)
                    else Currency.FREN
                ),
                timestamp=get_block_timestamp(block),
                extrinsic_hash=get_extrinsic_hash(item),
                from_=get_ss58_address(payload.from_, ss58_prefix),
                to=get_ss58_address(payload.to, ss58_prefix),
                amount=payload.amount,
                fee=get_extrinsic_fee(item),
            )
        case FrenBurnedPayload():
            return FrenBurnedEvent(
                id=item.event.id,
                block_number=block.header.height,
                timestamp=get_block_timestamp(block),
                extrinsic_hash=get_extrinsic_hash(item),
                account=get_ss58_address(payload.who, ss58_prefix),
                burned_amount=payload.amount,
                burned_for=payload.what_they_got,
            )
        case _:
            raise GmIndexerTypeError(
                message=f"Unexpected payload {type(payload).__name__} for {extraction.name.value}"
            )
