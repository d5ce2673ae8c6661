"""Shared field types for response schemas."""
from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def _as_utc(value: datetime) -> datetime:
    # Stored dates come back from BSON as naive UTC.
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


ObjectIdStr = Annotated[str, BeforeValidator(str)]
UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    message: str
