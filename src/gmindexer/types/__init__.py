from .chain import Block, BlockHeader, Event, Extrinsic, Item

__all__ = (
    "Block",
    "BlockHeader",
    "Event",
    "Extrinsic",
    "Item",
)
