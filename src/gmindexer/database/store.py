from collections import defaultdict
from collections.abc import Iterable
from typing import Any

from sqlalchemy import inspect, select
from sqlalchemy.orm import Session

from gmindexer.database.models import Base
from gmindexer.logging import logger

# Stay under SQLite's default bound parameter limit
LOAD_CHUNK_SIZE = 500


class Store:
    """
    Entity cache in front of a `Session`.

    Entities fetched with `load` or `get` are cached per model, including IDs known to be absent, so
    handlers can look up the same account many times in a batch without another query. Changes are
    written with `flush`; committing is left to the caller.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self._cache: defaultdict[type[Base], dict[Any, Base | None]] = defaultdict(dict)

    def load(self, model: type[Base], ids: Iterable[Any]) -> None:
        """
        Fetch all entities of `model` with the given IDs that are not already cached.
        """

        cache = self._cache[model]
        missing = [id_ for id_ in set(ids) if id_ not in cache]
        if not missing:
            return

        primary_key = inspect(model).primary_key[0]
        for start in range(0, len(missing), LOAD_CHUNK_SIZE):
            chunk = missing[start : start + LOAD_CHUNK_SIZE]
            for id_ in chunk:
                cache[id_] = None
            for entity in self.session.scalars(select(model).where(primary_key.in_(chunk))):
                cache[inspect(entity).identity[0]] = entity

        logger.debug(f"Loaded {len(missing)} {model.__name__} IDs")

    def get[T: Base](self, model: type[T], id_: Any) -> T | None:
        cache = self._cache[model]
        if id_ not in cache:
            cache[id_] = self.session.get(model, id_)
        entity = cache[id_]
        assert entity is None or isinstance(entity, model)
        return entity

    def upsert(self, entity: Base) -> None:
        id_ = inspect(entity).mapper.primary_key_from_instance(entity)[0]
        self._cache[type(entity)][id_] = entity
        self.session.add(entity)

    def flush(self) -> None:
        self.session.flush()
