from datetime import date

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column

from players_api.models.base import Base


class Player(Base):
    __tablename__ = "players"

    # Column names keep the camelCase used by existing players databases.
    id: Mapped[int] = mapped_column(primary_key=True)
    first_name: Mapped[str] = mapped_column("firstName", String(100))
    middle_name: Mapped[str | None] = mapped_column("middleName", String(100), nullable=True)
    last_name: Mapped[str] = mapped_column("lastName", String(100))
    date_of_birth: Mapped[date | None] = mapped_column("dateOfBirth", Date, nullable=True)
    squad_number: Mapped[int] = mapped_column("squadNumber", unique=True)
    position: Mapped[str] = mapped_column(String(50))
    abbr_position: Mapped[str | None] = mapped_column("abbrPosition", String(10), nullable=True)
    team: Mapped[str | None] = mapped_column(String(100), nullable=True)
    league: Mapped[str | None] = mapped_column(String(100), nullable=True)
    starting11: Mapped[bool | None] = mapped_column(nullable=True)
