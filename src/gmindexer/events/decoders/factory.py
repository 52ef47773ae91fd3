"""Factory for selecting payload decoders by runtime spec version."""

from typing import ClassVar

from gmindexer.events.decoders.base import PayloadDecoder
from gmindexer.events.decoders.v3 import (
    BalancesTransferV3Decoder,
    CurrenciesFrenBurnedV3Decoder,
    TokensTransferV3Decoder,
)
from gmindexer.events.names import QualifiedEventName
from gmindexer.exceptions import UnsupportedPayloadVersion
from gmindexer.logging import logger
from gmindexer.types.aliases import SpecVersion


class PayloadDecoderFactory:
    """
    Maps each event name to its decoders, keyed by the runtime spec version that introduced the
    payload shape. A shape stays valid until a later version replaces it.
    """

    DECODERS: ClassVar[dict[QualifiedEventName, dict[int, type[PayloadDecoder]]]] = {
        QualifiedEventName.TOKENS_TRANSFER: {
            3: TokensTransferV3Decoder,
        },
        QualifiedEventName.BALANCES_TRANSFER: {
            3: BalancesTransferV3Decoder,
        },
        QualifiedEventName.CURRENCIES_FREN_BURNED: {
            3: CurrenciesFrenBurnedV3Decoder,
        },
    }

    _instances: ClassVar[dict[type[PayloadDecoder], PayloadDecoder]] = {}

    @classmethod
    def get_decoder(
        cls,
        event_name: QualifiedEventName,
        spec_version: SpecVersion | None = None,
    ) -> PayloadDecoder:
        """Get the decoder for an event at a runtime spec version.

        Args:
            event_name: The qualified name of the event
            spec_version: Runtime spec version of the block holding the event. If None, the
                newest registered decoder is used.

        Returns:
            Decoder instance for the payload shape in force at that version

        Raises:
            ValueError: If the event has no registered decoders
            UnsupportedPayloadVersion: If the version predates every registered decoder
        """
        versions = cls.DECODERS.get(event_name)
        if not versions:
            msg = f"No payload decoders registered for {event_name.value}"
            raise ValueError(msg)

        if spec_version is None:
            version = max(versions)
        else:
            candidates = [version for version in versions if version <= spec_version]
            if not candidates:
                raise UnsupportedPayloadVersion(event_name.value, spec_version)
            version = max(candidates)

        decoder_class = versions[version]
        if decoder_class not in cls._instances:
            cls._instances[decoder_class] = decoder_class()
            logger.debug(
                f"Created {decoder_class.__name__} for {event_name.value} payload version {version}"
            )
        return cls._instances[decoder_class]
