"""Starting and stopping the programs placed on the scene."""

from __future__ import annotations

import subprocess
import time
from enum import IntEnum
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from .scene import Scene
from .session import Session
from .software import CLOSE_APP_PROCESS, Software
from .structures import Kind

INTERNAL_NAME_MARKER = "nom-interne"
DELAY_DIVISOR = 10


class StartResult(IntEnum):
    """Outcome of starting a session."""

    STARTED = 0
    CLOSE_APPLICATION = 1
    NOTHING_TO_START = 2


def build_start_order(items: Iterable) -> List[Software]:
    """Programs of ``items`` in start order.

    Higher priorities come first; among equal priorities the program added
    later starts first. The close-application object, when there is one,
    comes last. Without any program the order is empty.
    """
    items = list(items)
    programs = [item for item in items if item.kind == Kind.SOFTWARE]
    if not programs:
        return []
    ordered = sorted(reversed(programs), key=lambda program: -program.priority)
    closing = next((item for item in items if item.kind == Kind.CLOSE_APP), None)
    if closing is not None:
        ordered.append(closing)
    return ordered


def _split(text: str) -> List[str]:
    return [part for part in text.split(",") if part]


def resolve_file_argument(path: str, option: str, context_path: str) -> List[str]:
    """Command line arguments naming a linked file.

    A name without a folder is looked up in ``context_path``. A ``.txt`` file
    whose first line is the internal-name marker stands for the name on its
    second line. Returns ``[option, name]`` (``option`` left out when empty),
    or nothing when the file is missing or names nothing.
    """
    name = path
    if not Path(path).parent.name and "/" not in path and "\\" not in path:
        name = context_path + path
    candidate = Path(name)
    if not candidate.is_file():
        return []
    if candidate.suffix == ".txt":
        with candidate.open(encoding="utf-8", errors="replace") as handle:
            lines = [line.rstrip("\r\n") for line in handle]
        if lines and lines[0] == INTERNAL_NAME_MARKER:
            name = lines[1] if len(lines) > 1 else ""
    if not name:
        return []
    return [option, name] if option else [name]


def _spawn(argv: List[str]) -> None:
    subprocess.Popen(argv)


def _is_running(name: str) -> bool:
    try:
        result = subprocess.run(
            ["pgrep", "-f", name],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except FileNotFoundError:
        return False
    return result.returncode == 0


def _kill(user: str, name: str) -> None:
    try:
        subprocess.run(
            ["killall", "-I", "-u", user, name],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except FileNotFoundError:
        pass


class Launcher:
    """Starts the programs of a scene in priority order and stops them later."""

    def __init__(
        self,
        session: Session,
        scene: Scene,
        *,
        spawn: Optional[Callable[[List[str]], None]] = None,
        is_running: Optional[Callable[[str], bool]] = None,
        kill: Optional[Callable[[str, str], None]] = None,
        sleep: Optional[Callable[[float], None]] = None,
        substitute: Optional[Callable[[List[str]], List[str]]] = None,
    ) -> None:
        self.session = session
        self.scene = scene
        self._spawn = spawn or _spawn
        self._is_running = is_running or _is_running
        self._kill = kill or _kill
        self._sleep = sleep or time.sleep
        self._substitute = substitute or (lambda options: options)
        self.started: List[str] = []

    def start_session(self) -> StartResult:
        """Start every program of the scene; tell whether the application should close."""
        self.started = []
        order = build_start_order(self.scene)
        if not order:
            return StartResult.NOTHING_TO_START
        result = StartResult.STARTED
        for program in order:
            if program.process_name == CLOSE_APP_PROCESS:
                result = StartResult.CLOSE_APPLICATION
                continue
            if not (program.unique and self._is_running(program.process_name)):
                self._launch(program)
            self._record(program)
        return result

    def _file_arguments(self, program: Software, case: int) -> List[str]:
        linked = program.linked_file(case)
        if linked is None:
            return []
        return resolve_file_argument(
            linked.full_path, program.options(case * 100), self.session.context_path
        )

    def _command_line(self, program: Software) -> List[str]:
        folder = program.folder if program.folder.endswith("/") else program.folder + "/"
        argv = [folder + program.process_name]
        argv.extend(self._substitute(_split(program.options(1))))
        argv.extend(self._file_arguments(program, 3))
        argv.extend(self._file_arguments(program, 2))
        return argv

    def _launch(self, program: Software) -> None:
        argv = self._command_line(program)
        try:
            self._spawn(argv)
        except OSError:
            pass
        self._sleep(program.delay // DELAY_DIVISOR)

    def _record(self, program: Software) -> None:
        self.started.append(program.process_name)
        self.started.extend(_split(program.dependency))

    def stop_processes(self) -> None:
        """Stop every program started, and its dependencies, for the session user."""
        for name in self.started:
            self._kill(self.session.user, name)
        self.started = []

    def has_started(self) -> bool:
        return bool(self.started)