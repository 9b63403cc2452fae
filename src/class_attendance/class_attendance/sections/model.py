from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SectionInput:
    """Section payload without id, as accepted by create/update."""

    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class Section:
    """A class/group that students belong to."""

    section_id: int
    name: str
    description: Optional[str] = None

    def to_json(self) -> dict:
        return {"id": self.section_id, "name": self.name, "description": self.description}
