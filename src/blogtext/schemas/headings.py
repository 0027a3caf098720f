"""Heading outline models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Heading(BaseModel):
    """A Markdown heading in a table-of-contents outline.

    Level-1 and level-2 headings carry a ``children`` list of the level-3
    headings nested under them. A level-3 heading that appears before any
    level-1/2 heading is wrapped in a container that has only ``children``.
    """

    level: int | None = Field(default=None, ge=1, le=3)
    id: str | None = None
    title: str | None = None
    children: list["Heading"] | None = None

    @property
    def is_container(self) -> bool:
        return self.level is None and self.id is None and self.title is None

    def to_dict(self) -> dict[str, Any]:
        """Plain dict with unset fields left out."""
        return self.model_dump(exclude_none=True)
