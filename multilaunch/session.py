"""Current session: its folders, its project and context, and its error state."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

NO_ERROR = 0
NOT_CREATED = 1
NOTHING_SAVED = 2
UNKNOWN_PROJECT = 3
UNKNOWN_CONTEXT = 4
NO_SESSION = 5
CONTEXT_NOT_CREATED = 997
PROJECT_NOT_CREATED = 998
DIALOG_CANCELLED = 999

_LABELS = {
    NO_ERROR: "aucune erreur",
    NOT_CREATED: "Le projet ou le contexte n'est pas créé",
    NOTHING_SAVED: "Il n'y a aucun projet ou contexte sauvegardé.",
    UNKNOWN_PROJECT: "Projet inexistant.",
    UNKNOWN_CONTEXT: "Contexte inexistant.",
    NO_SESSION: "Aucune session en cours.",
    CONTEXT_NOT_CREATED: "Le contexte n'est pas créé.",
    PROJECT_NOT_CREATED: "Le projet n'est pas créée.",
    DIALOG_CANCELLED: "Sortie abandon de boite",
}
_UNKNOWN_LABEL = "erreur non répertoriée"


def _label(code: int) -> str:
    return _LABELS.get(code, _UNKNOWN_LABEL)


class SessionError(Exception):
    """A session is not usable; ``code`` tells why."""

    def __init__(self, code: int) -> None:
        super().__init__(_label(code))
        self.code = code
        self.label = _label(code)


@dataclass(frozen=True)
class _State:
    project: str = ""
    context: str = ""
    configuration: str = ""
    user: str = ""


class Session:
    """Names and folders of the project and context being worked on."""

    def __init__(self, home: Optional[Union[str, os.PathLike]] = None) -> None:
        base = Path(home) if home is not None else Path.home()
        self.root_path = f"{base}/MultiApp/"
        self.error = NO_ERROR
        self.project_name = ""
        self.context_name = ""
        self.configuration_name = ""
        self.user = ""
        self.configurations: List[str] = []
        self._saved = _State()
        self._reserved = _State()
        if not Path(self.root_path).exists():
            Path(self.root_path, "fichierstandard").mkdir(parents=True, exist_ok=True)

    @property
    def standard_path(self) -> str:
        return self.root_path + "fichierstandard/"

    @property
    def project_path(self) -> str:
        return f"{self.root_path.rstrip('/')}/{self.project_name}/"

    @property
    def context_path(self) -> str:
        return f"{self.project_path}{self.context_name}/"

    @property
    def ok(self) -> bool:
        """True when there is no error, or only a cancelled dialog."""
        return self.error in (NO_ERROR, DIALOG_CANCELLED)

    @property
    def dialog_cancelled(self) -> bool:
        return self.error == DIALOG_CANCELLED

    def error_label(self) -> str:
        return _label(self.error)

    def check(self) -> None:
        """Raise SessionError when the session is not usable."""
        if not self.ok:
            raise SessionError(self.error)

    def _snapshot(self) -> _State:
        return _State(self.project_name, self.context_name, self.configuration_name, self.user)

    def _apply(self, state: _State) -> None:
        self.project_name = state.project
        self.context_name = state.context
        self.configuration_name = state.configuration
        self.user = state.user

    def save_state(self) -> None:
        self._saved = self._snapshot()

    def restore_state(self) -> None:
        self._apply(self._saved)

    def reserve_state(self) -> None:
        self._reserved = self._snapshot()

    def recover_state(self) -> None:
        self._apply(self._reserved)