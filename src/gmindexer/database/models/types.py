from typing import Annotated

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import mapped_column

# SS58 addresses with a two-byte prefix are 49 characters
PrimaryKeySs58Address = Annotated[
    str,
    mapped_column(String(64), primary_key=True),
]
PrimaryKeyEventId = Annotated[
    str,
    mapped_column(String(64), primary_key=True),
]
ForeignKeyAccountId = Annotated[
    str,
    mapped_column(ForeignKey("accounts.id"), index=True),
]
ExtrinsicHash = Annotated[
    str,
    mapped_column(String(66)),
]
