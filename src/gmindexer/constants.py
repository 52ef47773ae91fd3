# SS58 address format registered for the GM chain
GMORDIE_SS58_PREFIX = 7013

# Substrate AccountId32
ACCOUNT_ID_LENGTH = 32

__all__ = (
    "ACCOUNT_ID_LENGTH",
    "GMORDIE_SS58_PREFIX",
)
