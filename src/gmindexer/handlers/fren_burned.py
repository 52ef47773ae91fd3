from collections.abc import Iterable

from gmindexer.database.models import FrenBurnedTable
from gmindexer.database.store import Store
from gmindexer.events import BurnedReward, FrenBurnedEvent
from gmindexer.handlers.account import get_or_create_account
from gmindexer.logging import logger


def handle_fren_burned(store: Store, burns: Iterable[FrenBurnedEvent]) -> int:
    """
    Store new FREN burns and update the burned totals of the burning account.

    Returns the number of burns stored.
    """

    burns = list(burns)
    store.load(FrenBurnedTable, (burn.id for burn in burns))

    num_stored = 0
    for burn in burns:
        if store.get(FrenBurnedTable, burn.id) is not None:
            logger.debug(f"Skipping FREN burn {burn.id}, already stored")
            continue

        account = get_or_create_account(store, burn.account)

        match burn.burned_for:
            case BurnedReward.GM:
                account.burned_for_gm += burn.burned_amount
                account.burned_for_gmgn += burn.burned_amount
            case BurnedReward.GN:
                account.burned_for_gn += burn.burned_amount
                account.burned_for_gmgn += burn.burned_amount
            case None:
                account.burned_for_nothing += burn.burned_amount
        account.burned_total += burn.burned_amount

        store.upsert(
            FrenBurnedTable(
                id=burn.id,
                account=account,
                block_number=burn.block_number,
                timestamp=burn.timestamp,
                extrinsic_hash=burn.extrinsic_hash,
                burned_amount=burn.burned_amount,
                burned_for=None if burn.burned_for is None else burn.burned_for.value,
            )
        )
        num_stored += 1

    return num_stored
