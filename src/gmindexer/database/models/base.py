from datetime import datetime
from typing import Annotated, ClassVar

from sqlalchemy import DateTime, Dialect, String, Text
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator


class IntMappedToString(TypeDecorator[int]):
    """
    Token balances are u128 values, which exceed the usual 8 byte limit for most SQL backends. Map
    these values to a 40 character VARCHAR which can hold a string representation of all possible
    values.
    """

    cache_ok = True
    impl = String(40)

    def process_bind_param(
        self,
        value: int | None,
        dialect: Dialect,  # noqa: ARG002
    ) -> str | None:
        """
        Perform the Python type -> DB type conversion.
        """

        return None if value is None else str(value)

    def process_result_value(
        self,
        value: str | None,
        dialect: Dialect,  # noqa: ARG002
    ) -> int | None:
        """
        Perform the DB type -> Python type conversion.
        """

        return None if value is None else int(value)


BigInteger = Annotated[int, IntMappedToString]


class Base(DeclarativeBase):
    type_annotation_map: ClassVar = {
        # keys must be Python types (native or Annotated)
        # values must be SQLAlchemy types
        BigInteger: IntMappedToString,
        datetime: DateTime(timezone=True),
        str: Text,
    }
