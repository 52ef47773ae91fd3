from gmindexer.database.operations import (
    backup_sqlite_database,
    compact_sqlite_database,
    create_new_sqlite_database,
    get_scoped_sqlite_session,
    get_sqlite_engine,
)
from gmindexer.database.store import Store

__all__ = (
    "Store",
    "backup_sqlite_database",
    "compact_sqlite_database",
    "create_new_sqlite_database",
    "get_scoped_sqlite_session",
    "get_sqlite_engine",
)
