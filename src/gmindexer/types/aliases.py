from typing import Annotated

from pydantic import Field

type BlockNumber = Annotated[int, Field(ge=0)]
type EventId = str
type SpecVersion = Annotated[int, Field(ge=0)]
type Ss58Address = str
