from collections.abc import Iterable

from gmindexer.database.models import TransferTable
from gmindexer.database.store import Store
from gmindexer.events import Currency, TransferEvent
from gmindexer.handlers.account import get_or_create_account
from gmindexer.logging import logger


def handle_transfers(store: Store, transfers: Iterable[TransferEvent]) -> int:
    """
    Store new transfers and update the sent/received totals of both accounts.

    Transfers already in the store are skipped, so a reprocessed batch does not count them twice.
    Returns the number of transfers stored.
    """

    transfers = list(transfers)
    store.load(TransferTable, (transfer.id for transfer in transfers))

    num_stored = 0
    for transfer in transfers:
        if store.get(TransferTable, transfer.id) is not None:
            logger.debug(f"Skipping transfer {transfer.id}, already stored")
            continue

        from_account = get_or_create_account(store, transfer.from_)
        to_account = get_or_create_account(store, transfer.to)

        match transfer.currency_id:
            case Currency.GM:
                from_account.sent_gm += transfer.amount
                from_account.sent_gmgn += transfer.amount
                to_account.received_gm += transfer.amount
                to_account.received_gmgn += transfer.amount
            case Currency.GN:
                from_account.sent_gn += transfer.amount
                from_account.sent_gmgn += transfer.amount
                to_account.received_gn += transfer.amount
                to_account.received_gmgn += transfer.amount
            case Currency.FREN:
                pass

        store.upsert(
            TransferTable(
                id=transfer.id,
                block_number=transfer.block_number,
                timestamp=transfer.timestamp,
                extrinsic_hash=transfer.extrinsic_hash,
                from_account=from_account,
                to_account=to_account,
                currency=transfer.currency_id.value,
                amount=transfer.amount,
                fee=transfer.fee,
            )
        )
        num_stored += 1

    return num_stored
