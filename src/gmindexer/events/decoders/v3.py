"""Payload decoders for the event shapes introduced with runtime spec version 3."""

from collections.abc import Mapping
from typing import Any

from gmindexer.events.decoders.base import (
    BalancesTransferPayload,
    FrenBurnedPayload,
    TokensTransferPayload,
    get_required_arg,
    get_unsigned_int_arg,
    get_variant_tag,
    tag_to_enum,
)
from gmindexer.events.names import BurnedReward, Currency, QualifiedEventName
from gmindexer.exceptions import UnrecognizedTagError
from gmindexer.types.aliases import EventId


class TokensTransferV3Decoder:
    """`Tokens.Transfer {currencyId, from, to, amount}`"""

    event_name = QualifiedEventName.TOKENS_TRANSFER
    version = 3

    def decode(self, event_id: EventId, args: Mapping[str, Any]) -> TokensTransferPayload:
        tag = get_variant_tag("currencyId", get_required_arg(event_id, args, "currencyId"))
        if tag is None:
            raise UnrecognizedTagError(field="currencyId", tag=tag)

        return TokensTransferPayload(
            currency_id=tag_to_enum(Currency, "currencyId", tag),
            from_=get_required_arg(event_id, args, "from"),
            to=get_required_arg(event_id, args, "to"),
            amount=get_unsigned_int_arg(event_id, args, "amount"),
        )


class BalancesTransferV3Decoder:
    """`Balances.Transfer {from, to, amount}`"""

    event_name = QualifiedEventName.BALANCES_TRANSFER
    version = 3

    def decode(self, event_id: EventId, args: Mapping[str, Any]) -> BalancesTransferPayload:
        return BalancesTransferPayload(
            from_=get_required_arg(event_id, args, "from"),
            to=get_required_arg(event_id, args, "to"),
            amount=get_unsigned_int_arg(event_id, args, "amount"),
        )


class CurrenciesFrenBurnedV3Decoder:
    """`Currencies.FrenBurned {who, amount, whatTheyGot?}`"""

    event_name = QualifiedEventName.CURRENCIES_FREN_BURNED
    version = 3

    def decode(self, event_id: EventId, args: Mapping[str, Any]) -> FrenBurnedPayload:
        tag = get_variant_tag("whatTheyGot", args.get("whatTheyGot"))

        return FrenBurnedPayload(
            who=get_required_arg(event_id, args, "who"),
            amount=get_unsigned_int_arg(event_id, args, "amount"),
            what_they_got=None if tag is None else tag_to_enum(BurnedReward, "whatTheyGot", tag),
        )
