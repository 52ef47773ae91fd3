"""Versioned decoders for the argument payloads of recognized chain events."""

from gmindexer.events.decoders.base import (
    BalancesTransferPayload,
    EventPayload,
    FrenBurnedPayload,
    PayloadDecoder,
    TokensTransferPayload,
)
from gmindexer.events.decoders.factory import PayloadDecoderFactory
from gmindexer.events.decoders.v3 import (
    BalancesTransferV3Decoder,
    CurrenciesFrenBurnedV3Decoder,
    TokensTransferV3Decoder,
)

__all__ = [
    "BalancesTransferPayload",
    "BalancesTransferV3Decoder",
    "CurrenciesFrenBurnedV3Decoder",
    "EventPayload",
    "FrenBurnedPayload",
    "PayloadDecoder",
    "PayloadDecoderFactory",
    "TokensTransferPayload",
    "TokensTransferV3Decoder",
]
