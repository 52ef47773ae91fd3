from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, BigInteger
from .types import (
    ExtrinsicHash,
    ForeignKeyAccountId,
    PrimaryKeyEventId,
    PrimaryKeySs58Address,
)


class AccountTable(Base):
    __tablename__ = "accounts"

    id: Mapped[PrimaryKeySs58Address]

    received_gm: Mapped[BigInteger] = mapped_column(default=0)
    received_gn: Mapped[BigInteger] = mapped_column(default=0)
    received_gmgn: Mapped[BigInteger] = mapped_column(default=0)
    sent_gm: Mapped[BigInteger] = mapped_column(default=0)
    sent_gn: Mapped[BigInteger] = mapped_column(default=0)
    sent_gmgn: Mapped[BigInteger] = mapped_column(default=0)

    burned_for_gm: Mapped[BigInteger] = mapped_column(default=0)
    burned_for_gn: Mapped[BigInteger] = mapped_column(default=0)
    burned_for_gmgn: Mapped[BigInteger] = mapped_column(default=0)
    burned_for_nothing: Mapped[BigInteger] = mapped_column(default=0)
    burned_total: Mapped[BigInteger] = mapped_column(default=0)

    # Relationships
    transfers_sent: Mapped[list["TransferTable"]] = relationship(
        "TransferTable",
        back_populates="from_account",
        foreign_keys="TransferTable.from_id",
    )
    transfers_received: Mapped[list["TransferTable"]] = relationship(
        "TransferTable",
        back_populates="to_account",
        foreign_keys="TransferTable.to_id",
    )
    fren_burned: Mapped[list["FrenBurnedTable"]] = relationship(
        "FrenBurnedTable",
        back_populates="account",
    )


class TransferTable(Base):
    __tablename__ = "transfers"

    id: Mapped[PrimaryKeyEventId]
    block_number: Mapped[int] = mapped_column(index=True)
    timestamp: Mapped[datetime]
    extrinsic_hash: Mapped[ExtrinsicHash | None]
    from_id: Mapped[ForeignKeyAccountId]
    to_id: Mapped[ForeignKeyAccountId]
    currency: Mapped[str]
    amount: Mapped[BigInteger]
    fee: Mapped[BigInteger]

    # Relationships
    from_account: Mapped["AccountTable"] = relationship(
        "AccountTable",
        back_populates="transfers_sent",
        foreign_keys="TransferTable.from_id",
    )
    to_account: Mapped["AccountTable"] = relationship(
        "AccountTable",
        back_populates="transfers_received",
        foreign_keys="TransferTable.to_id",
    )


class FrenBurnedTable(Base):
    __tablename__ = "fren_burned"

    id: Mapped[PrimaryKeyEventId]
    account_id: Mapped[ForeignKeyAccountId]
    block_number: Mapped[int] = mapped_column(index=True)
    timestamp: Mapped[datetime]
    extrinsic_hash: Mapped[ExtrinsicHash | None]
    burned_amount: Mapped[BigInteger]
    burned_for: Mapped[str | None]

    # Relationships
    account: Mapped["AccountTable"] = relationship(
        "AccountTable",
        back_populates="fren_burned",
    )
