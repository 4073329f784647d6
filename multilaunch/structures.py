"""Record types shared by the scene, the configuration and the session."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

TAG_SIZE = 32
COLOR_SIZE = 18
NAME_SIZE = 80
LONG_NAME_SIZE = 254
MAX_DIMENSION = 0xFFFF


def truncate_field(text: str, size: int) -> str:
    """Cut ``text`` so its UTF-8 form fits a zero-terminated field of ``size`` bytes."""
    if size < 1:
        raise ValueError(f"field size must be at least 1, got {size}")
    encoded = text.encode("utf-8")
    if len(encoded) < size:
        return text
    return encoded[: size - 1].decode("utf-8", errors="ignore")


def _fit(instance: object, name: str, size: int) -> None:
    object.__setattr__(instance, name, truncate_field(getattr(instance, name), size))


class Kind(IntEnum):
    """Kind of an object shown on the scene."""

    SOFTWARE = 100
    CLOSE_APP = 110
    UNKNOWN_SOFTWARE = 120
    WORK_FILE = 200
    CONFIG_FILE = 300
    ANCHOR = 1000
    CONNECTION = 5000
    ELEMENT = 9999


@dataclass(frozen=True)
class Rectangle:
    """Width and height of a symbol, in pixels."""

    width: int = 40
    height: int = 40

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if not 0 <= value <= MAX_DIMENSION:
                raise ValueError(f"{name} out of range: {value}")


@dataclass(frozen=True)
class Font:
    """Text style: height, colour and family name."""

    height: int = 0
    color: str = "#000000"
    name: str = ""

    def __post_init__(self) -> None:
        _fit(self, "color", COLOR_SIZE)
        _fit(self, "name", LONG_NAME_SIZE)


@dataclass(frozen=True)
class Colors:
    """Banner and background colours of a symbol."""

    banner: str = "#FFFFFF"
    background: str = "#FFFFFF"

    def __post_init__(self) -> None:
        _fit(self, "banner", COLOR_SIZE)
        _fit(self, "background", COLOR_SIZE)


@dataclass(frozen=True)
class SurfaceStyle:
    """Colours and font of a symbol."""

    colors: Colors = field(default_factory=Colors)
    font: Font = field(default_factory=Font)


@dataclass(frozen=True)
class Symbol:
    """Complete look of a symbol: its size and its surface style."""

    dimension: Rectangle = field(default_factory=Rectangle)
    surface: SurfaceStyle = field(default_factory=SurfaceStyle)


@dataclass(frozen=True)
class LineStyle:
    """Look of a connection line."""

    name: str = ""
    color: str = "#FF0000"
    line_type: int = 1
    thickness: int = 2

    def __post_init__(self) -> None:
        _fit(self, "name", NAME_SIZE)
        _fit(self, "color", COLOR_SIZE)


@dataclass(frozen=True)
class AnchorStyle:
    """Look of the anchor dropped when linking objects."""

    symbol: Symbol = field(default_factory=Symbol)
    icon: str = ""

    def __post_init__(self) -> None:
        _fit(self, "icon", LONG_NAME_SIZE)


@dataclass(frozen=True)
class PriorityStyle:
    """A start priority: its label, its value and the symbol it gives."""

    label: str = ""
    priority: int = 1
    symbol: Symbol = field(default_factory=Symbol)
    connectable: bool = True
    unique: bool = False

    def __post_init__(self) -> None:
        _fit(self, "label", NAME_SIZE)


@dataclass(frozen=True)
class SoftwareRecord:
    """Description of a program that can be started."""

    process_name: str = ""
    display_name: str = ""
    folder: str = ""
    help: str = ""
    icon: str = ""
    dependency: str = ""
    standard_config: str = ""
    standard_work: str = ""
    options: str = ""
    config_option: str = ""
    work_option: str = ""
    delay: int = 0
    unique: bool = False
    class_number: int = 0

    _LONG = ("folder", "help", "icon", "dependency", "standard_config", "standard_work")
    _SHORT = ("process_name", "display_name", "options", "config_option", "work_option")

    def __post_init__(self) -> None:
        for name in self._LONG:
            _fit(self, name, LONG_NAME_SIZE)
        for name in self._SHORT:
            _fit(self, name, NAME_SIZE)
        if not 0 <= self.delay <= 0xFF:
            raise ValueError(f"delay out of range: {self.delay}")
        if not 0 <= self.class_number <= 0xFF:
            raise ValueError(f"class number out of range: {self.class_number}")


@dataclass(frozen=True)
class ContextObject:
    """A program saved in a context, with the files linked to it."""

    display_name: str = ""
    x: float = 0.0
    y: float = 0.0
    priority_index: int = 0
    work_file: str = ""
    work_x: float = 0.0
    work_y: float = 0.0
    config_file: str = ""
    config_x: float = 0.0
    config_y: float = 0.0

    def __post_init__(self) -> None:
        _fit(self, "display_name", NAME_SIZE)
        _fit(self, "work_file", LONG_NAME_SIZE)
        _fit(self, "config_file", LONG_NAME_SIZE)


@dataclass(frozen=True)
class ContextLink:
    """A link between two saved objects, given by their rank."""

    source: int = 0
    target: int = 0
    name: str = ""

    def __post_init__(self) -> None:
        _fit(self, "name", NAME_SIZE)
        for name in ("source", "target"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFFFF:
                raise ValueError(f"{name} out of range: {value}")