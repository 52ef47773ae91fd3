from datetime import UTC, datetime

from gmindexer.events import (
    BurnedReward,
    Currency,
    EventKind,
    FrenBurnedEvent,
    ParsedEvents,
    TransferEvent,
)

TIMESTAMP = datetime(2023, 1, 1, tzinfo=UTC)


def _transfer(event_id: str, amount: int = 1) -> TransferEvent:
    return TransferEvent(
        id=event_id,
        block_number=1,
        currency_id=Currency.GM,
        timestamp=TIMESTAMP,
        extrinsic_hash=None,
        from_="from-address",
        to="to-address",
        amount=amount,
    )


def _burn(event_id: str) -> FrenBurnedEvent:
    return FrenBurnedEvent(
        id=event_id,
        block_number=1,
        timestamp=TIMESTAMP,
        extrinsic_hash=None,
        account="burner-address",
        burned_amount=1,
        burned_for=BurnedReward.GM,
    )


def test_empty():
    parsed_events = ParsedEvents()
    assert len(parsed_events) == 0
    assert set(parsed_events) == {EventKind.TRANSFER, EventKind.FREN_BURNED}
    for kind in EventKind:
        assert parsed_events.get(kind) == []
    assert parsed_events.account_ids == set()


def test_records_grouped_by_kind():
    parsed_events = ParsedEvents()
    parsed_events.add(_transfer("a"))
    parsed_events.add(_burn("b"))
    parsed_events.add(_transfer("c"))

    assert [record.id for record in parsed_events.transfers] == ["a", "c"]
    assert [record.id for record in parsed_events.fren_burned] == ["b"]
    assert parsed_events.get(EventKind.TRANSFER) == parsed_events.transfers
    assert len(parsed_events) == 3
    assert "b" in parsed_events
    assert "z" not in parsed_events


def test_insertion_order_is_kept():
    parsed_events = ParsedEvents()
    ids = [f"{n:010d}" for n in reversed(range(20))]
    for event_id in ids:
        parsed_events.add(_transfer(event_id))
    assert [record.id for record in parsed_events.transfers] == ids


def test_duplicates_collapse_by_id_not_identity():
    parsed_events = ParsedEvents()
    first = _transfer("a", amount=1)
    duplicate = _transfer("a", amount=1)
    assert first is not duplicate

    assert parsed_events.add(first) is True
    assert parsed_events.add(duplicate) is False
    assert parsed_events.add(_transfer("a", amount=2)) is False

    assert parsed_events.transfers == [first]
    assert parsed_events.transfers[0] is first


def test_account_ids_collected():
    parsed_events = ParsedEvents()
    parsed_events.add(_transfer("a"))
    parsed_events.add(_burn("b"))
    assert parsed_events.account_ids == {"from-address", "to-address", "burner-address"}


def test_repr():
    parsed_events = ParsedEvents()
    parsed_events.add(_transfer("a"))
    assert repr(parsed_events) == "ParsedEvents(TRANSFER=1, FREN_BURNED=0)"
