from datetime import date
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Range of a SQLite INTEGER column.
SQL_INTEGER_MIN = -(2**63)
SQL_INTEGER_MAX = 2**63 - 1


class PlayerSchema(BaseModel):
    """A player record as it is stored, cached and returned.

    ``id`` is ``None`` only for a record that has not been inserted yet.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: int | None = None
    first_name: str
    middle_name: str | None = None
    last_name: str
    date_of_birth: date | None = None
    squad_number: int
    position: str
    abbr_position: str | None = None
    team: str | None = None
    league: str | None = None
    starting11: bool | None = None


class PlayerRequest(BaseModel):
    """Body accepted by POST and PUT on /players."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int | None = Field(default=None, ge=1, le=SQL_INTEGER_MAX)
    first_name: RequiredText
    middle_name: str | None = None
    last_name: RequiredText
    date_of_birth: date | None = None
    squad_number: int = Field(ge=1, le=99)
    position: RequiredText
    abbr_position: str | None = None
    team: str | None = None
    league: str | None = None
    starting11: bool | None = None

    def to_schema(self, player_id: int | None = None) -> PlayerSchema:
        data = self.model_dump()
        if player_id is not None:
            data["id"] = player_id
        return PlayerSchema(**data)
