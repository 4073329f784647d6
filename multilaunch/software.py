"""Programs placed on the scene, ready to be started."""

from __future__ import annotations

from typing import Optional

from .configuration import Configuration
from .nodes import ActiveNode, LinkedFile
from .scene import Scene
from .structures import ContextObject, Kind, SoftwareRecord

CLOSE_APP_LABEL = "Quitter automatiquement"
CLOSE_APP_PROCESS = "fermerauto"
CLOSE_APP_ICON = "/icone/autoquitter.png"


def _close_app_record() -> SoftwareRecord:
    return SoftwareRecord(
        process_name=CLOSE_APP_PROCESS,
        display_name=CLOSE_APP_LABEL,
        help="Fermer dgdemlog après le lancement du contexte",
        delay=20,
        unique=True,
        class_number=1,
    )


class Software(ActiveNode):
    """A program on the scene, drawn with the symbol of its start priority."""

    def __init__(
        self,
        configuration: Configuration,
        scene: Scene,
        priority_index: int,
        kind: int = Kind.SOFTWARE,
        record: Optional[SoftwareRecord] = None,
    ) -> None:
        """Create a program placed in the middle of the scene.

        Without ``record``, priority 0 is only allowed for the close-application
        object; any other priority takes the configuration's current program.
        """
        super().__init__(configuration, scene, kind)
        if record is None:
            if priority_index == 0:
                if kind != Kind.CLOSE_APP:
                    raise ValueError("priority 0 is reserved for the close-application object")
                record = _close_app_record()
            else:
                record = configuration.current_software
                if record is None:
                    raise ValueError("no program is selected in the configuration")
        self.record = record
        self.name = record.display_name
        self._set_priority(priority_index)
        self.place(scene.width // 2, scene.height // 2)

    @classmethod
    def from_context(
        cls, configuration: Configuration, scene: Scene, context: ContextObject
    ) -> "Software":
        """Rebuild a program saved in a context; raises LookupError if it is unknown."""
        if context.display_name.startswith(CLOSE_APP_LABEL):
            kind, record = Kind.CLOSE_APP, _close_app_record()
        elif configuration.select_software_by_name(context.display_name):
            kind, record = Kind.SOFTWARE, configuration.current_software
        else:
            raise LookupError(f"unknown program: {context.display_name!r}")
        count = len(configuration.priorities)
        index = context.priority_index if context.priority_index < count else count // 2
        node = cls(configuration, scene, index, kind, record=record)
        node.place(context.x, context.y)
        return node

    def _set_priority(self, index: int) -> None:
        priorities = self.configuration.priorities
        if not 0 <= index < len(priorities):
            raise IndexError(f"no priority at index {index}")
        style = priorities[index]
        self.priority_index = index
        self.priority_label = style.label
        self.apply_symbol(style.symbol)

    @property
    def title(self) -> str:
        return self.record.process_name

    @property
    def caption(self) -> str:
        return self.record.display_name

    @property
    def label(self) -> str:
        return self.record.display_name

    @property
    def icon(self) -> str:
        return self.record.icon or CLOSE_APP_ICON

    @property
    def priority(self) -> int:
        """Start priority value of the current priority index."""
        return self.configuration.priorities[self.priority_index].priority

    @property
    def process_name(self) -> str:
        return self.record.process_name

    @property
    def folder(self) -> str:
        return self.record.folder

    @property
    def dependency(self) -> str:
        return self.record.dependency

    @property
    def delay(self) -> int:
        return self.record.delay

    @property
    def unique(self) -> bool:
        return self.record.unique

    def linked_file(self, case: int) -> Optional[LinkedFile]:
        """File linked for ``case`` (2 work, 3 configuration), if one is connected."""
        if self.find_connection(case * 100) is not None:
            return self.last_found
        return None

    def to_context(self) -> ContextObject:
        """Describe this program and its linked files for saving."""
        fields = dict(
            display_name=self.record.display_name,
            x=self.x,
            y=self.y,
            priority_index=self.priority_index,
        )
        work = self.find_connection(Kind.WORK_FILE)
        if work is not None and work.target is not None:
            fields.update(
                work_file=work.target.full_path, work_x=work.target.x, work_y=work.target.y
            )
        config = self.find_connection(Kind.CONFIG_FILE)
        if config is not None and config.target is not None:
            fields.update(
                config_file=config.target.full_path,
                config_x=config.target.x,
                config_y=config.target.y,
            )
        return ContextObject(**fields)

    def options(self, kind: int) -> str:
        """Command line options: 1 general, 200 work file, 300 configuration file."""
        return {
            1: self.record.options,
            Kind.WORK_FILE: self.record.work_option,
            Kind.CONFIG_FILE: self.record.config_option,
        }.get(kind, "")

    def standard_linked_name(self, kind: int) -> str:
        return {
            Kind.WORK_FILE: self.record.standard_work,
            Kind.CONFIG_FILE: self.record.standard_config,
        }.get(kind, "")

    def reconfigure(self, priority_index: int) -> None:
        """Switch to another priority and take its symbol."""
        self._set_priority(priority_index)
        self.recompute_bounds()

    def is_process(self, name: str) -> bool:
        return name == self.record.process_name

    def has_linked_file(self, kind: int) -> bool:
        return bool(self.standard_linked_name(kind))

    def exists_on_scene(self) -> bool:
        """True when the program may run only once and another copy is on the scene."""
        if not self.record.unique:
            return False
        return any(
            other is not self and isinstance(other, Software) and other.is_process(self.process_name)
            for other in self.scene.of_kind(Kind.SOFTWARE)
        )