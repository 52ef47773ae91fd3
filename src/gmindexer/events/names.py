from enum import Enum


class EventKind(Enum):
    """Canonical event kinds produced by the normalizer."""

    TRANSFER = "TRANSFER"
    FREN_BURNED = "FREN_BURNED"


class QualifiedEventName(Enum):
    """Chain events recognized by the classifier, keyed by their `Module.Event` name."""

    TOKENS_ENDOWED = "Tokens.Endowed"
    TOKENS_TRANSFER = "Tokens.Transfer"
    BALANCES_TRANSFER = "Balances.Transfer"
    CURRENCIES_FREN_BURNED = "Currencies.FrenBurned"


class Currency(Enum):
    """Tokens of the GM chain. FREN is the native token."""

    FREN = "FREN"
    GM = "GM"
    GN = "GN"


class BurnedReward(Enum):
    """Reward granted for burning FREN."""

    GM = "GM"
    GN = "GN"
