"""Configuration: known programs, start priorities and the look of the scene."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .structures import (
    NAME_SIZE,
    AnchorStyle,
    LineStyle,
    PriorityStyle,
    SoftwareRecord,
    Symbol,
    truncate_field,
)


def _default_lines() -> List[LineStyle]:
    return [LineStyle() for _ in range(3)]


def _default_linked_files() -> List[Symbol]:
    return [Symbol() for _ in range(2)]


@dataclass
class Configuration:
    """Everything a configuration holds, and lookups over it.

    ``connection_styles`` are indexed 0 for program links, 1 for work files
    and 2 for configuration files; ``linked_file_styles`` 0 for work files
    and 1 for configuration files.
    """

    name: str = ""
    software: List[SoftwareRecord] = field(default_factory=list)
    priorities: List[PriorityStyle] = field(default_factory=list)
    connection_styles: List[LineStyle] = field(default_factory=_default_lines)
    linked_file_styles: List[Symbol] = field(default_factory=_default_linked_files)
    anchor: AnchorStyle = field(default_factory=AnchorStyle)
    icon_symbol: int = 40
    icon_management: int = 40
    icon_top: int = 40
    current_software: Optional[SoftwareRecord] = None

    def priority_value(self, index: int) -> int:
        """Start priority at ``index``; 1 when there is no such priority."""
        if 0 <= index < len(self.priorities):
            return self.priorities[index].priority
        return 1

    def priority_labels(self) -> List[str]:
        return [priority.label for priority in self.priorities]

    def select_software_by_name(self, name: str) -> bool:
        """Make the program shown as ``name`` the current one.

        The current program is left as it was when no program matches.
        """
        wanted = truncate_field(name, NAME_SIZE)
        for record in self.software:
            if record.display_name == wanted:
                self.current_software = record
                return True
        return False

    def select_software(self, class_number: int, index: int) -> bool:
        """Make the ``index``-th program of a class the current one."""
        self.current_software = None
        members = self.software_of_class(class_number)
        if 0 <= index < len(members):
            self.current_software = members[index]
        return self.current_software is not None

    def software_of_class(self, class_number: int) -> List[SoftwareRecord]:
        return [record for record in self.software if record.class_number == class_number]

    def software_classes(self, sort: bool = False) -> List[int]:
        """Distinct class numbers, in order of first appearance unless ``sort``."""
        classes: List[int] = []
        for record in self.software:
            if record.class_number not in classes:
                classes.append(record.class_number)
        if sort:
            classes.sort()
        return classes

    def connection_style(self, index: int) -> LineStyle:
        return self.connection_styles[index]

    def linked_file_style(self, index: int) -> Symbol:
        return self.linked_file_styles[index]