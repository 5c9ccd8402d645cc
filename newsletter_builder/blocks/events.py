"""Bloc calendrier d'événements."""
from typing import List, Literal

from pydantic import Field, field_validator

from ..core.schemas import CamelModel
from .base import BaseBlock, BlockContent, only_records


class EventItem(CamelModel):
    title: str = ""
    date: str = ""
    time: str = ""
    location: str = ""
    description: str = ""


class EventCalendarContent(BlockContent):
    title: str = "Upcoming Events"
    events: List[EventItem] = Field(default_factory=list)

    @field_validator("events", mode="before")
    @classmethod
    def keep_records(cls, value):
        return only_records(value)


class EventCalendarBlock(BaseBlock):
    type: Literal["event-calendar"] = "event-calendar"
    content: EventCalendarContent = Field(default_factory=EventCalendarContent)
