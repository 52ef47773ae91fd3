import logging
from collections.abc import Callable, Generator
from typing import Any

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from gmindexer.database.models import Base
from gmindexer.logging import logger
from gmindexer.types.chain import Block, BlockHeader, Event, Extrinsic, Item

ALICE = bytes.fromhex("d43593c715fdd31c61141abd04a99fd6822c8558854ccde39a5684e7a56da27d")
BOB = bytes.fromhex("8eaf04151687736326c9fea17e25fc5287613693c912909cb226aa4794f26a48")
CHARLIE = bytes.fromhex("90b5ab205c6974c9ea841be688864633dc9ca8a357843eeacf2314649965fe22")

# 2023-01-01T00:00:00Z
BLOCK_TIMESTAMP_MS = 1_672_531_200_000


@pytest.fixture(scope="session", autouse=True)
def _set_gmindexer_logging():
    """
    Set the logging level to DEBUG for the test run
    """
    logger.setLevel(logging.DEBUG)


@pytest.fixture
def make_item() -> Callable[..., Item]:
    def _make_item(
        name: str,
        event_id: str,
        args: dict[str, Any] | None = None,
        extrinsic_hash: str | None = None,
        fee: int | None = None,
    ) -> Item:
        return Item(
            name=name,
            event=Event(
                id=event_id,
                args={} if args is None else args,
                extrinsic=None if extrinsic_hash is None else Extrinsic(hash=extrinsic_hash, fee=fee),
            ),
        )

    return _make_item


@pytest.fixture
def make_block() -> Callable[..., Block]:
    def _make_block(
        height: int,
        items: list[Item],
        timestamp: int = BLOCK_TIMESTAMP_MS,
        spec_version: int | None = 3,
    ) -> Block:
        return Block(
            header=BlockHeader(height=height, timestamp=timestamp, spec_version=spec_version),
            items=items,
        )

    return _make_block


@pytest.fixture
def tokens_transfer(make_item: Callable[..., Item]) -> Callable[..., Item]:
    def _tokens_transfer(
        event_id: str,
        currency: str = "GM",
        from_: Any = ALICE,
        to: Any = BOB,
        amount: Any = 500,
        **kwargs: Any,
    ) -> Item:
        return make_item(
            "Tokens.Transfer",
            event_id,
            {"currencyId": {"__kind": currency}, "from": from_, "to": to, "amount": amount},
            **kwargs,
        )

    return _tokens_transfer


@pytest.fixture
def balances_transfer(make_item: Callable[..., Item]) -> Callable[..., Item]:
    def _balances_transfer(
        event_id: str,
        from_: Any = ALICE,
        to: Any = BOB,
        amount: Any = 500,
        **kwargs: Any,
    ) -> Item:
        return make_item(
            "Balances.Transfer",
            event_id,
            {"from": from_, "to": to, "amount": amount},
            **kwargs,
        )

    return _balances_transfer


@pytest.fixture
def fren_burned(make_item: Callable[..., Item]) -> Callable[..., Item]:
    def _fren_burned(
        event_id: str,
        who: Any = ALICE,
        amount: Any = 1_000,
        reward: str | None = None,
        **kwargs: Any,
    ) -> Item:
        args: dict[str, Any] = {"who": who, "amount": amount}
        if reward is not None:
            args["whatTheyGot"] = {"__kind": reward}
        return make_item("Currencies.FrenBurned", event_id, args, **kwargs)

    return _fren_burned


@pytest.fixture
def session() -> Generator[Session, None, None]:
    engine = create_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


@pytest.fixture
def alice() -> bytes:
    return ALICE


@pytest.fixture
def bob() -> bytes:
    return BOB


@pytest.fixture
def charlie() -> bytes:
    return CHARLIE
