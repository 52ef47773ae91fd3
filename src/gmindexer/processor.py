from collections.abc import Iterable

from sqlalchemy.orm import Session

from gmindexer.constants import GMORDIE_SS58_PREFIX
from gmindexer.database.models import AccountTable
from gmindexer.database.store import Store
from gmindexer.events import ParsedEvents, get_parsed_events_data
from gmindexer.handlers import handle_fren_burned, handle_transfers
from gmindexer.logging import logger
from gmindexer.types.chain import Block


def process_batch(
    session: Session,
    blocks: Iterable[Block],
    ss58_prefix: int = GMORDIE_SS58_PREFIX,
) -> ParsedEvents:
    """
    Normalize a batch and write the records through the session.

    The whole batch is normalized before anything is written, so a `NormalizationError` leaves the
    session untouched. Pending changes are flushed but not committed.
    """

    parsed_events = get_parsed_events_data(blocks, ss58_prefix=ss58_prefix)

    store = Store(session)
    store.load(AccountTable, parsed_events.account_ids)

    num_transfers = handle_transfers(store, parsed_events.transfers)
    num_burns = handle_fren_burned(store, parsed_events.fren_burned)
    store.flush()

    logger.info(f"Stored {num_transfers} transfers and {num_burns} FREN burns")
    return parsed_events
