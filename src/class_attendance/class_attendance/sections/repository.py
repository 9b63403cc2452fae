from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Section, SectionInput


class SectionRepository(Protocol):
    def list_sections(self) -> Sequence[Section]:
        raise NotImplementedError

    def get_section(self, section_id: int) -> Optional[Section]:
        raise NotImplementedError

    def create_section(self, payload: SectionInput) -> Section:
        raise NotImplementedError

    def update_section(self, section_id: int, payload: SectionInput) -> Section:
        """Replace the section stored at ``section_id``.

        Creates the record at that id when none exists.
        """

        raise NotImplementedError

    def delete_section(self, section_id: int) -> None:
        raise NotImplementedError
