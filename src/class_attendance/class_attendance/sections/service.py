from __future__ import annotations

from typing import Any, Sequence

from ..common.validators import optional_str, require_length, require_payload, require_str
from ..core.constants import SECTION_DESCRIPTION_MAX, SECTION_NAME_MAX, SECTION_NAME_MIN
from ..core.exceptions import NotFoundError
from .model import Section, SectionInput
from .repository import SectionRepository


def parse_section_payload(data: Any) -> SectionInput:
    data = require_payload(data)
    name = require_length(require_str(data, "name"), "name", min_len=SECTION_NAME_MIN, max_len=SECTION_NAME_MAX)
    description = optional_str(data, "description")
    if description is not None:
        require_length(description, "description", max_len=SECTION_DESCRIPTION_MAX)
    return SectionInput(name=name, description=description)


class SectionService:
    """Use case: manage class sections."""

    def __init__(self, sections: SectionRepository):
        self._sections = sections

    def list_all(self) -> Sequence[Section]:
        return self._sections.list_sections()

    def get(self, section_id: int) -> Section:
        section = self._sections.get_section(int(section_id))
        if section is None:
            raise NotFoundError("Section not found")
        return section

    def create(self, data: Any) -> Section:
        return self._sections.create_section(parse_section_payload(data))

    def update(self, section_id: int, data: Any) -> Section:
        return self._sections.update_section(int(section_id), parse_section_payload(data))

    def delete(self, section_id: int) -> None:
        # Students keep their section_id; there is no cascade.
        self._sections.delete_section(int(section_id))
