import functools

from hexbytes import HexBytes
from scalecodec.utils.ss58 import ss58_encode

from gmindexer.constants import ACCOUNT_ID_LENGTH, GMORDIE_SS58_PREFIX
from gmindexer.exceptions import MalformedAddressError


def _to_account_id(address: object) -> bytes:
    if not isinstance(address, bytes | bytearray | str):
        raise MalformedAddressError(address, f"unsupported type {type(address).__name__}")
    if isinstance(address, str):
        # Exactly "0x" followed by one hex digit pair per account ID byte
        if not address.startswith("0x"):
            raise MalformedAddressError(address, "hex string must start with 0x")
        if len(address) != 2 + 2 * ACCOUNT_ID_LENGTH:
            raise MalformedAddressError(
                address, f"expected {2 * ACCOUNT_ID_LENGTH} hex digits, got {len(address) - 2}"
            )
    try:
        account_id = bytes(HexBytes(address))
    except ValueError as exc:
        raise MalformedAddressError(address, "not a hex string") from exc

    if len(account_id) != ACCOUNT_ID_LENGTH:
        raise MalformedAddressError(
            address, f"expected {ACCOUNT_ID_LENGTH} bytes, got {len(account_id)}"
        )
    return account_id


@functools.lru_cache(maxsize=4096)
def _encode(account_id: bytes, prefix: int) -> str:
    try:
        return ss58_encode(account_id, ss58_format=prefix)
    except ValueError as exc:
        raise MalformedAddressError(account_id, str(exc)) from exc


def get_ss58_address(address: bytes | bytearray | str, prefix: int = GMORDIE_SS58_PREFIX) -> str:
    """
    Encode a raw 32-byte account ID (bytes or 0x-prefixed hex) as an SS58 address string.

    Raises `MalformedAddressError` for anything that is not a 32-byte account ID.
    """

    return _encode(_to_account_id(address), prefix)
