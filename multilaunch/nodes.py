"""Scene objects that hold connections: the base node, anchors and linked files."""

from __future__ import annotations

from typing import List, Optional

from .configuration import Configuration
from .connection import Connection
from .element import Surface
from .scene import Scene
from .structures import ContextObject, Kind, LineStyle


class ActiveNode(Surface):
    """A surface that keeps the connections drawn from or to it."""

    def __init__(
        self,
        configuration: Configuration,
        scene: Scene,
        kind: int = Kind.ELEMENT,
        name: str = "élément",
    ) -> None:
        super().__init__(kind, name)
        self.configuration = configuration
        self.scene = scene
        self.connections: List[Connection] = []
        self.current_connection: Optional[Connection] = None
        self.anchor: Optional["Anchor"] = None
        self.last_found: Optional[Surface] = None

    def add_connection(self, connection: Connection) -> None:
        self.connections.append(connection)

    def find_connection(self, kind: int) -> Optional[Connection]:
        """First connection whose target is of ``kind``."""
        for connection in self.connections:
            self.last_found = connection.target
            if connection.target is not None and connection.target.kind == kind:
                return connection
        return None

    def refresh_connections(self) -> None:
        for connection in self.connections:
            connection.refresh()

    def drop_anchor(
        self, anchor: "Anchor", boat: Surface, style: Optional[LineStyle]
    ) -> None:
        """Start a line from ``boat`` to ``anchor``, waiting for a real target."""
        self.anchor = anchor
        self.current_connection = Connection(style, anchor)
        self.current_connection.set_source(boat)
        self.refresh_connections()
        self.connections.append(self.current_connection)

    def release_anchor(self) -> None:
        self.anchor = None

    def transfer_anchor_connection(self, target: Surface) -> None:
        """Move the end of the pending line from the anchor to ``target``."""
        if self.current_connection is None:
            return
        self.current_connection.set_target(target)
        self.refresh_connections()

    def connect(self, other: Optional["ActiveNode"]) -> bool:
        """Draw a line from this node to ``other`` and put it on the scene."""
        if other is None:
            return False
        index = {Kind.WORK_FILE: 1, Kind.CONFIG_FILE: 2}.get(other.kind, 0)
        connection = Connection(self.configuration.connection_style(index))
        self.current_connection = connection
        self.connections.append(connection)
        other.add_connection(connection)
        if not connection.attach(self, other):
            return False
        self.scene.add(connection)
        return True

    def remove_connection(self, connection: Surface) -> None:
        if connection in self.connections:
            self.connections.remove(connection)

    def remove_connections(self) -> None:
        """Detach every line from both its ends and take it off the scene."""
        for connection in list(self.connections):
            connection.disconnect()
            self.scene.remove(connection)
        self.connections.clear()
        self.current_connection = None


class Anchor(Surface):
    """Temporary marker dragged to pick the target of a new line."""

    def __init__(self, boat: Surface, configuration: Configuration) -> None:
        super().__init__(Kind.ANCHOR, "ancre")
        self.boat = boat
        self.style = configuration.anchor
        self.icon = self.style.icon
        self.clear_banner()
        self.apply_symbol(self.style.symbol)
        self.place(boat.x, boat.y - self.height / 0.75)

    def connected_object(self) -> Surface:
        return self.boat


class LinkedFile(ActiveNode):
    """A work or configuration file attached to a program."""

    def __init__(self, configuration: Configuration, scene: Scene) -> None:
        super().__init__(configuration, scene, Kind.ELEMENT, "fic lie inconnu")
        self.icon = "/icone/quitter2.png"
        self.file_name = ""
        self.full_path = ""

    @property
    def title(self) -> str:
        return self.file_name

    @property
    def caption(self) -> str:
        return self.name

    def set_file_name(self, path: str) -> bool:
        """Store ``path``; fails when it holds no directory separator."""
        self.file_name = ""
        self.full_path = path
        position = max(path.rfind("/"), path.rfind("\\"))
        if position < 0:
            return False
        self.file_name = path[position + 1:]
        return True

    def init_from_context(self, kind: int, context: ContextObject) -> bool:
        """Set up the file saved in ``context`` for a work or configuration kind."""
        self.kind = kind
        if kind == Kind.WORK_FILE:
            self.name = "fichier travail"
            self.icon = "/icone/fictrv.png"
            self.apply_symbol(self.configuration.linked_file_style(0))
            self.place(context.work_x, context.work_y)
            return self.set_file_name(context.work_file)
        if kind == Kind.CONFIG_FILE:
            self.name = "fichier configuration"
            self.icon = "/icone/ficcfg.png"
            self.apply_symbol(self.configuration.linked_file_style(1))
            self.place(context.config_x, context.config_y)
            return self.set_file_name(context.config_file)
        self.name = "fic lie inconnu"
        self.icon = "/icone/quitter2.png"
        return False

    def init_new(self, kind: int, name: str, icon: str) -> None:
        """Set up a freshly chosen file, placed a third of the way into the scene."""
        self.kind = kind
        self.name = name
        self.icon = icon
        self.apply_symbol(self.configuration.linked_file_style(0))
        self.place(self.scene.width // 3, self.scene.height // 3)