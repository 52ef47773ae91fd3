from collections.abc import Iterable

from gmindexer.constants import GMORDIE_SS58_PREFIX
from gmindexer.events.aggregator import ParsedEvents
from gmindexer.events.classifier import classify
from gmindexer.events.normalizer import normalize_item
from gmindexer.logging import logger
from gmindexer.types.chain import Block


def get_parsed_events_data(
    blocks: Iterable[Block],
    ss58_prefix: int = GMORDIE_SS58_PREFIX,
) -> ParsedEvents:
    """
    Normalize every recognized event in a batch and group the records by kind.

    Blocks are visited in the given order and items in block order. Any `NormalizationError`
    propagates out of this function and no records from the batch are returned.
    """

    parsed_events = ParsedEvents()
    num_blocks = num_items = 0

    for block in blocks:
        num_blocks += 1
        for item in block.items:
            num_items += 1
            extraction = classify(item)
            if extraction is None:
                continue
            parsed_events.add(
                normalize_item(
                    item=item,
                    block=block,
                    extraction=extraction,
                    ss58_prefix=ss58_prefix,
                )
            )

    logger.debug(f"Parsed {num_items} items in {num_blocks} blocks: {parsed_events}")
    return parsed_events
