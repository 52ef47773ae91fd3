"""Base protocols and payload types for versioned event payload decoders."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Protocol

from gmindexer.events.names import BurnedReward, Currency, QualifiedEventName
from gmindexer.exceptions import MalformedPayloadError, UnrecognizedTagError
from gmindexer.types.aliases import EventId

# Tagged variants are decoded upstream into a mapping with the tag under this key
VARIANT_TAG_KEY = "__kind"


@dataclass(frozen=True, slots=True)
class TokensTransferPayload:
    currency_id: Currency
    from_: Any  # raw account ID, checked when converted to SS58
    to: Any
    amount: int


@dataclass(frozen=True, slots=True)
class BalancesTransferPayload:
    from_: Any
    to: Any
    amount: int


@dataclass(frozen=True, slots=True)
class FrenBurnedPayload:
    who: Any
    amount: int
    what_they_got: BurnedReward | None


type EventPayload = TokensTransferPayload | BalancesTransferPayload | FrenBurnedPayload


class PayloadDecoder(Protocol):
    """
    Decodes the arguments of one event at one payload version. Decoders are stateless.
    """

    event_name: ClassVar[QualifiedEventName]
    version: ClassVar[int]

    def decode(self, event_id: EventId, args: Mapping[str, Any]) -> EventPayload: ...


def get_required_arg(event_id: EventId, args: Mapping[str, Any], key: str) -> Any:
    try:
        return args[key]
    except KeyError:
        raise MalformedPayloadError(event_id, key, "is missing") from None


def get_unsigned_int_arg(event_id: EventId, args: Mapping[str, Any], key: str) -> int:
    """
    Read an unsigned integer argument. Large balances may arrive as decimal strings.
    """

    value = get_required_arg(event_id, args, key)
    if isinstance(value, str) and value.isdecimal():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedPayloadError(event_id, key, f"is not an integer: {value!r}")
    if value < 0:
        raise MalformedPayloadError(event_id, key, f"is negative: {value}")
    return value


def get_variant_tag(field: str, value: Any) -> str | None:
    """
    Return the tag of a tagged variant, or None if the variant or its tag is absent.
    """

    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise UnrecognizedTagError(field=field, tag=value)
    return value.get(VARIANT_TAG_KEY)


def tag_to_enum[E: Enum](enum_type: type[E], field: str, tag: str) -> E:
    try:
        return enum_type(tag)
    except ValueError:
        raise UnrecognizedTagError(field=field, tag=tag) from None
