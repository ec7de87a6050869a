"""Public value types, enumerations and configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Any, Callable, Optional

from traa.errors import ErrorCode

MAX_DEVICE_ID_LENGTH = 256
MAX_DEVICE_NAME_LENGTH = 256

FULLSCREEN_SCREEN_ID = -1
INVALID_SCREEN_ID = -2


def _check_length(field_name: str, value: str, limit: int) -> None:
    # The limit counts a terminating byte, so the text itself must stay below it.
    if len(value.encode("utf-8")) >= limit:
        raise ValueError(f"{field_name} must be shorter than {limit} bytes in UTF-8")


@dataclass(frozen=True)
class Size:
    """Width and height of an object."""

    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Point:
    """A point in 2D space."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Rect:
    """A rectangle given by its edges."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0


class DeviceType(IntEnum):
    UNKNOWN = 0
    CAMERA = 1
    MICROPHONE = 2
    SPEAKER = 3
    MEDIA_FILE = 4


class DeviceSlot(IntEnum):
    UNKNOWN = 0
    USB = 1
    BLUETOOTH = 2
    NETWORK = 3


class DeviceOrientation(IntEnum):
    UNKNOWN = 0
    FRONT = 1
    BACK = 2


class DeviceState(IntEnum):
    IDLE = 0
    POSTING = 1
    ACTIVE = 2
    PAUSED = 3


class DeviceEvent(IntEnum):
    UNKNOWN = 0
    # operation
    ATTACHING = 1
    ATTACHED = 2
    DETACHING = 3
    DETACHED = 4
    # network and bluetooth
    CONNECTING = 5
    CONNECTED = 6
    DISCONNECTING = 7
    DISCONNECTED = 8
    # usb
    PLUGGING = 9
    PLUGGED = 10
    UNPLUGGING = 11
    UNPLUGGED = 12
    # screen and window
    MINIMIZING = 13
    MINIMIZED = 14
    MAXIMIZING = 15
    MAXIMIZED = 16
    CLOSING = 17
    CLOSED = 18
    RESIZING = 19
    RESIZED = 20
    # media file
    MAPPING = 21
    MAPPED = 22
    UNMAPPING = 23
    UNMAPPED = 24


@dataclass
class DeviceInfo:
    """Description of a device."""

    id: str = ""
    name: str = ""
    type: DeviceType = DeviceType.UNKNOWN
    slot: DeviceSlot = DeviceSlot.UNKNOWN
    orientation: DeviceOrientation = DeviceOrientation.UNKNOWN
    state: DeviceState = DeviceState.IDLE

    def __post_init__(self) -> None:
        _check_length("id", self.id, MAX_DEVICE_ID_LENGTH)
        _check_length("name", self.name, MAX_DEVICE_NAME_LENGTH)


class ScreenSourceFlags(IntFlag):
    """Filters applied when enumerating screen sources."""

    NONE = 0
    IGNORE_SCREEN = 1 << 0
    IGNORE_WINDOW = 1 << 1
    IGNORE_MINIMIZED = 1 << 2
    NOT_IGNORE_UNTITLED = 1 << 3
    NOT_IGNORE_UNRESPONSIVE = 1 << 4
    IGNORE_CURRENT_PROCESS = 1 << 5
    NOT_IGNORE_TOOLWINDOW = 1 << 6
    IGNORE_NOPROCESS_PATH = 1 << 7
    NOT_SKIP_SYSTEM_WINDOWS = 1 << 8
    ALL = 0xFFFFFFFF


class ScreenCapturerId(IntEnum):
    """Identifies the capturer implementation that produced a frame."""

    UNKNOWN = 0
    WIN_GDI = 1
    WIN_DXGI = 2
    WIN_MAGNIFIER = 3
    WIN_WGC = 4
    WIN_MAX = 20
    LINUX_X11 = 21
    LINUX_WAYLAND = 22
    LINUX_MAX = 40
    MAC = 41
    MAC_MAX = 60
    MAX = 100


@dataclass
class ScreenSourceInfo:
    """Description of a screen or window that can be captured."""

    id: int = INVALID_SCREEN_ID
    screen_id: int = INVALID_SCREEN_ID
    is_window: bool = False
    is_minimized: bool = False
    is_maximized: bool = False
    rect: Rect = field(default_factory=Rect)
    icon_size: Size = field(default_factory=Size)
    thumbnail_size: Size = field(default_factory=Size)
    title: str = ""
    process_path: str = ""
    icon_data: Optional[bytes] = None
    thumbnail_data: Optional[bytes] = None

    def __post_init__(self) -> None:
        _check_length("title", self.title, MAX_DEVICE_NAME_LENGTH)
        _check_length("process_path", self.process_path, MAX_DEVICE_NAME_LENGTH)


class LogLevel(IntEnum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5
    OFF = 6


@dataclass
class LogConfig:
    """Log destination and rotation settings.

    With no log file, messages go to the console and the other options are ignored.
    """

    log_file: Optional[str] = None
    max_size: int = 1024 * 1024 * 2
    max_files: int = 3
    level: LogLevel = LogLevel.INFO


ErrorCallback = Callable[[Any, ErrorCode, str], None]
DeviceEventCallback = Callable[[Any, DeviceInfo, DeviceEvent], None]


@dataclass
class EventHandler:
    """Callbacks invoked for errors and device events."""

    on_error: Optional[ErrorCallback] = None
    on_device_event: Optional[DeviceEventCallback] = None


@dataclass
class Config:
    """Library configuration: userdata, logging and event callbacks."""

    userdata: Any = None
    log_config: LogConfig = field(default_factory=LogConfig)
    event_handler: EventHandler = field(default_factory=EventHandler)