"""Named Windows virtual-key codes used by ``nircmd sendkey``."""

from enum import Enum, IntEnum


class KeyAction(str, Enum):
    PRESS = "press"
    DOWN = "down"
    UP = "up"


class Key(IntEnum):
    BACKSPACE = 0x08
    TAB = 0x09
    ENTER = 0x0D
    SHIFT = 0x10
    CTRL = 0x11
    ALT = 0x12
    PAUSE = 0x13
    CAPS_LOCK = 0x14
    ESCAPE = 0x1B
    SPACE = 0x20
    PAGE_UP = 0x21
    PAGE_DOWN = 0x22
    END = 0x23
    HOME = 0x24
    LEFT = 0x25
    UP = 0x26
    RIGHT = 0x27
    DOWN = 0x28
    PRINT_SCREEN = 0x2C
    INSERT = 0x2D
    DELETE = 0x2E

    D0 = 0x30
    D1 = 0x31
    D2 = 0x32
    D3 = 0x33
    D4 = 0x34
    D5 = 0x35
    D6 = 0x36
    D7 = 0x37
    D8 = 0x38
    D9 = 0x39

    A = 0x41
    B = 0x42
    C = 0x43
    D = 0x44
    E = 0x45
    F = 0x46
    G = 0x47
    H = 0x48
    I = 0x49  # noqa: E741
    J = 0x4A
    K = 0x4B
    L = 0x4C
    M = 0x4D
    N = 0x4E
    O = 0x4F  # noqa: E741
    P = 0x50
    Q = 0x51
    R = 0x52
    S = 0x53
    T = 0x54
    U = 0x55
    V = 0x56
    W = 0x57
    X = 0x58
    Y = 0x59
    Z = 0x5A

    LEFT_WIN = 0x5B
    RIGHT_WIN = 0x5C
    APPS = 0x5D

    NUMPAD0 = 0x60
    NUMPAD1 = 0x61
    NUMPAD2 = 0x62
    NUMPAD3 = 0x63
    NUMPAD4 = 0x64
    NUMPAD5 = 0x65
    NUMPAD6 = 0x66
    NUMPAD7 = 0x67
    NUMPAD8 = 0x68
    NUMPAD9 = 0x69
    MULTIPLY = 0x6A
    ADD = 0x6B
    SUBTRACT = 0x6D
    DECIMAL = 0x6E
    DIVIDE = 0x6F

    F1 = 0x70
    F2 = 0x71
    F3 = 0x72
    F4 = 0x73
    F5 = 0x74
    F6 = 0x75
    F7 = 0x76
    F8 = 0x77
    F9 = 0x78
    F10 = 0x79
    F11 = 0x7A
    F12 = 0x7B

    NUM_LOCK = 0x90
    SCROLL_LOCK = 0x91

    @classmethod
    def lookup(cls, name: str) -> "Key":
        """Resolve a key by name, case-insensitively (``"ctrl"``, ``"F5"``)."""
        normalized = name.strip().upper().replace("-", "_").replace(" ", "_")
        if normalized.isdigit() and len(normalized) == 1:
            normalized = f"D{normalized}"
        try:
            return cls[normalized]
        except KeyError:
            raise ValueError(f"Unknown key: {name!r}") from None


def key_token(key: int) -> str:
    """Hex form nircmd expects, e.g. ``0x41``."""
    return f"0x{int(key):x}"
