"""
Input contract for a batch of decoded chain data.

Blocks arrive from the archive already decoded down to event arguments. Each block holds its items
in execution order, and each item names the event it carries (e.g. `Tokens.Transfer`).
"""

from dataclasses import dataclass, field
from typing import Any

from gmindexer.types.aliases import BlockNumber, EventId, SpecVersion


@dataclass(frozen=True, slots=True)
class Extrinsic:
    """The user-submitted transaction that triggered an event."""

    hash: str
    fee: int | None = None


@dataclass(frozen=True, slots=True)
class Event:
    id: EventId
    args: dict[str, Any] = field(default_factory=dict)
    extrinsic: Extrinsic | None = None


@dataclass(frozen=True, slots=True)
class Item:
    name: str
    event: Event


@dataclass(frozen=True, slots=True)
class BlockHeader:
    height: BlockNumber
    timestamp: int  # milliseconds since the Unix epoch
    hash: str | None = None
    spec_version: SpecVersion | None = None


@dataclass(frozen=True, slots=True)
class Block:
    header: BlockHeader
    items: list[Item] = field(default_factory=list)
