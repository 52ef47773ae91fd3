from typing import Any

from gmindexer.exceptions.base import GmIndexerError, GmIndexerValueError


class NormalizationError(GmIndexerError):
    """
    Base class for errors raised while normalizing a batch. All of them abort the batch.
    """


class MalformedAddressError(NormalizationError):
    """
    Raised when an address field cannot be decoded into a 32-byte account ID.
    """

    def __init__(self, address: Any, reason: str) -> None:
        self.address = address
        self.reason = reason
        super().__init__(message=f"Could not decode address {address!r}: {reason}")

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.address, self.reason)


class UnrecognizedTagError(NormalizationError, GmIndexerValueError):
    """
    Raised when a tagged variant carries a tag outside its closed enumeration.
    """

    def __init__(self, field: str, tag: Any) -> None:
        self.field = field
        self.tag = tag
        super().__init__(message=f"Unrecognized tag {tag!r} for field '{field}'")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.field, self.tag)


class MalformedPayloadError(NormalizationError, GmIndexerValueError):
    """
    Raised when a decoded event payload is missing a required field or holds an invalid value.
    """

    def __init__(self, event_id: str, field: str, reason: str) -> None:
        self.event_id = event_id
        self.reason = reason
        self.field = field
        super().__init__(message=f"Event {event_id}: field '{field}' {reason}")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.event_id, self.field, self.reason)


class UnsupportedPayloadVersion(NormalizationError):
    """
    Raised when no payload decoder is registered for the runtime version of a block.
    """

    def __init__(self, event_name: str, spec_version: int) -> None:
        self.event_name = event_name
        self.spec_version = spec_version
        super().__init__(
            message=f"No payload decoder for {event_name} at runtime spec version {spec_version}"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.event_name, self.spec_version)
