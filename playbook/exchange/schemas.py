"""Pydantic schemas for exported plays."""

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator


class ZoneRecord(BaseModel):
    """A zone rectangle as stored in a play."""

    x: float
    y: float
    width: float = Field(ge=0)
    height: float = Field(ge=0)


class PlayerRecord(BaseModel):
    """
    One player in a play.

    route is a path string ('M100,625L150,500') or a list of
    [command, x, y] triples; an empty string means no route. zone follows
    the same convention.
    """

    cx: float
    cy: float
    side: Optional[Literal["offense", "defense"]] = None
    route: Union[str, list[list[Any]]] = ""
    zone: Union[ZoneRecord, Literal[""], None] = ""

    @field_validator("route", mode="before")
    @classmethod
    def _none_route_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def has_route(self) -> bool:
        return bool(self.route)

    @property
    def zone_record(self) -> Optional[ZoneRecord]:
        return self.zone if isinstance(self.zone, ZoneRecord) else None


class PlayData(BaseModel):
    """Both sides of a play."""

    offense: list[PlayerRecord] = Field(default_factory=list)
    defense: list[PlayerRecord] = Field(default_factory=list)
