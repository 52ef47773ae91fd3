from gmindexer.database.models import AccountTable
from gmindexer.database.store import Store
from gmindexer.types.aliases import Ss58Address


def get_or_create_account(store: Store, account_id: Ss58Address) -> AccountTable:
    account = store.get(AccountTable, account_id)
    if account is None:
        account = AccountTable(
            id=account_id,
            received_gm=0,
            received_gn=0,
            received_gmgn=0,
            sent_gm=0,
            sent_gn=0,
            sent_gmgn=0,
            burned_for_gm=0,
            burned_for_gn=0,
            burned_for_gmgn=0,
            burned_for_nothing=0,
            burned_total=0,
        )
        store.upsert(account)
    return account
