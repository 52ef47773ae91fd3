import pytest

from gmindexer.events import BurnedReward, Currency, QualifiedEventName
from gmindexer.events.decoders import (
    BalancesTransferPayload,
    BalancesTransferV3Decoder,
    CurrenciesFrenBurnedV3Decoder,
    FrenBurnedPayload,
    PayloadDecoderFactory,
    TokensTransferPayload,
    TokensTransferV3Decoder,
)
from gmindexer.exceptions import (
    MalformedPayloadError,
    UnrecognizedTagError,
    UnsupportedPayloadVersion,
)

EVENT_ID = "0000001000-000001-abcde"


class TestPayloadDecoderFactory:
    @pytest.mark.parametrize(
        ("event_name", "decoder_class"),
        [
            (QualifiedEventName.TOKENS_TRANSFER, TokensTransferV3Decoder),
            (QualifiedEventName.BALANCES_TRANSFER, BalancesTransferV3Decoder),
            (QualifiedEventName.CURRENCIES_FREN_BURNED, CurrenciesFrenBurnedV3Decoder),
        ],
    )
    @pytest.mark.parametrize("spec_version", [None, 3, 4, 100])
    def test_selects_v3_decoder(self, event_name, decoder_class, spec_version):
        decoder = PayloadDecoderFactory.get_decoder(event_name, spec_version)
        assert isinstance(decoder, decoder_class)
        assert decoder.version == 3
        assert decoder.event_name is event_name

    def test_decoders_are_reused(self):
        assert PayloadDecoderFactory.get_decoder(
            QualifiedEventName.TOKENS_TRANSFER, 3
        ) is PayloadDecoderFactory.get_decoder(QualifiedEventName.TOKENS_TRANSFER, 10)

    def test_version_older_than_all_decoders(self):
        with pytest.raises(UnsupportedPayloadVersion) as exc_info:
            PayloadDecoderFactory.get_decoder(QualifiedEventName.TOKENS_TRANSFER, 2)
        assert exc_info.value.spec_version == 2

    def test_endowed_has_no_decoder(self):
        with pytest.raises(ValueError, match="No payload decoders"):
            PayloadDecoderFactory.get_decoder(QualifiedEventName.TOKENS_ENDOWED)


class TestTokensTransferV3Decoder:
    def test_decode(self, alice: bytes, bob: bytes):
        payload = TokensTransferV3Decoder().decode(
            EVENT_ID,
            {"currencyId": {"__kind": "GN"}, "from": alice, "to": bob, "amount": 10**30},
        )
        assert payload == TokensTransferPayload(
            currency_id=Currency.GN, from_=alice, to=bob, amount=10**30
        )

    def test_amount_as_decimal_string(self, alice: bytes, bob: bytes):
        payload = TokensTransferV3Decoder().decode(
            EVENT_ID,
            {
                "currencyId": {"__kind": "FREN"},
                "from": alice,
                "to": bob,
                "amount": "340282366920938463463374607431768211455",
            },
        )
        assert payload.amount == 2**128 - 1
        assert isinstance(payload.amount, int)

    @pytest.mark.parametrize("currency_id", [{"__kind": "DOT"}, {}, "GM", None])
    def test_unrecognized_currency(self, alice: bytes, bob: bytes, currency_id):
        with pytest.raises(UnrecognizedTagError) as exc_info:
            TokensTransferV3Decoder().decode(
                EVENT_ID,
                {"currencyId": currency_id, "from": alice, "to": bob, "amount": 1},
            )
        assert exc_info.value.field == "currencyId"

    @pytest.mark.parametrize("missing", ["currencyId", "from", "to", "amount"])
    def test_missing_field(self, alice: bytes, bob: bytes, missing: str):
        args = {"currencyId": {"__kind": "GM"}, "from": alice, "to": bob, "amount": 1}
        del args[missing]
        with pytest.raises(MalformedPayloadError) as exc_info:
            TokensTransferV3Decoder().decode(EVENT_ID, args)
        assert exc_info.value.field == missing
        assert exc_info.value.event_id == EVENT_ID

    @pytest.mark.parametrize("amount", [-1, 1.5, True, "12a", None])
    def test_invalid_amount(self, alice: bytes, bob: bytes, amount):
        with pytest.raises(MalformedPayloadError):
            TokensTransferV3Decoder().decode(
                EVENT_ID,
                {"currencyId": {"__kind": "GM"}, "from": alice, "to": bob, "amount": amount},
            )


class TestBalancesTransferV3Decoder:
    def test_decode(self, alice: bytes, bob: bytes):
        payload = BalancesTransferV3Decoder().decode(
            EVENT_ID, {"from": alice, "to": bob, "amount": 7}
        )
        assert payload == BalancesTransferPayload(from_=alice, to=bob, amount=7)

    def test_currency_field_is_not_read(self, alice: bytes, bob: bytes):
        payload = BalancesTransferV3Decoder().decode(
            EVENT_ID,
            {"currencyId": {"__kind": "nonsense"}, "from": alice, "to": bob, "amount": 7},
        )
        assert not hasattr(payload, "currency_id")


class TestCurrenciesFrenBurnedV3Decoder:
    @pytest.mark.parametrize(
        ("what_they_got", "expected"),
        [
            ({"__kind": "GM"}, BurnedReward.GM),
            ({"__kind": "GN"}, BurnedReward.GN),
        ],
    )
    def test_reward(self, alice: bytes, what_they_got, expected):
        payload = CurrenciesFrenBurnedV3Decoder().decode(
            EVENT_ID, {"who": alice, "amount": 5, "whatTheyGot": what_they_got}
        )
        assert payload == FrenBurnedPayload(who=alice, amount=5, what_they_got=expected)

    @pytest.mark.parametrize(
        "args_update",
        [{}, {"whatTheyGot": None}, {"whatTheyGot": {}}],
        ids=["field absent", "field null", "tag absent"],
    )
    def test_no_reward(self, alice: bytes, args_update):
        payload = CurrenciesFrenBurnedV3Decoder().decode(
            EVENT_ID, {"who": alice, "amount": 5} | args_update
        )
        assert payload.what_they_got is None

    @pytest.mark.parametrize("what_they_got", [{"__kind": "FREN"}, {"__kind": "XYZ"}, "GM"])
    def test_unrecognized_reward(self, alice: bytes, what_they_got):
        with pytest.raises(UnrecognizedTagError) as exc_info:
            CurrenciesFrenBurnedV3Decoder().decode(
                EVENT_ID, {"who": alice, "amount": 5, "whatTheyGot": what_they_got}
            )
        assert exc_info.value.field == "whatTheyGot"
