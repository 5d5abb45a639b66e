"""Keyboard and mouse state fed by window-system callbacks."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from duckengine.vector import Vector2


class KeyCode(enum.IntEnum):
    """Key and mouse-button identifiers."""

    MOUSE_LEFT = 0
    MOUSE_RIGHT = 1
    MOUSE_MIDDLE = 2
    SPACE = 32
    APOSTROPHE = 39
    COMMA = 44
    MINUS = 45
    PERIOD = 46
    SLASH = 47
    ALPHA_0 = 48
    ALPHA_1 = 49
    ALPHA_2 = 50
    ALPHA_3 = 51
    ALPHA_4 = 52
    ALPHA_5 = 53
    ALPHA_6 = 54
    ALPHA_7 = 55
    ALPHA_8 = 56
    ALPHA_9 = 57
    SEMICOLON = 59
    EQUAL = 61
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    LEFT_BRACKET = 91
    BACKSLASH = 92
    RIGHT_BRACKET = 93
    GRAVE_ACCENT = 96
    ESCAPE = 256
    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    INSERT = 260
    DELETE = 261
    ARROW_RIGHT = 262
    ARROW_LEFT = 263
    ARROW_DOWN = 264
    ARROW_UP = 265
    PAGE_UP = 266
    PAGE_DOWN = 267
    HOME = 268
    END = 269
    CAPS_LOCK = 280
    SCROLL_LOCK = 281
    NUM_LOCK = 282
    PRINT_SCREEN = 283
    PAUSE = 284
    F1 = 290
    F2 = 291
    F3 = 292
    F4 = 293
    F5 = 294
    F6 = 295
    F7 = 296
    F8 = 297
    F9 = 298
    F10 = 299
    F11 = 300
    F12 = 301
    KEYPAD_0 = 320
    KEYPAD_1 = 321
    KEYPAD_2 = 322
    KEYPAD_3 = 323
    KEYPAD_4 = 324
    KEYPAD_5 = 325
    KEYPAD_6 = 326
    KEYPAD_7 = 327
    KEYPAD_8 = 328
    KEYPAD_9 = 329
    KEYPAD_DECIMAL = 330
    KEYPAD_DIVIDE = 331
    KEYPAD_MULTIPLY = 332
    KEYPAD_SUBTRACT = 333
    KEYPAD_ADD = 334
    KEYPAD_ENTER = 335
    KEYPAD_EQUAL = 336
    LEFT_SHIFT = 340
    LEFT_CONTROL = 341
    LEFT_ALT = 342
    LEFT_SUPER = 343
    RIGHT_SHIFT = 344
    RIGHT_CONTROL = 345
    RIGHT_ALT = 346
    RIGHT_SUPER = 347
    MENU = 348


class KeyAction(enum.IntEnum):
    """Action reported with a key or button event."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


@dataclass
class _KeyState:
    down: bool = False
    pressed: bool = False
    up: bool = False


class InputState:
    """Per-frame keyboard and mouse state.

    Event handlers update the state; poll_events starts a frame and
    clear_events ends it, dropping the one-frame down and up flags.
    """

    def __init__(self) -> None:
        self._keys: dict[int, _KeyState] = {}
        self._cursor_locked = False
        self._mouse_last = Vector2(0.0, 0.0)
        self._mouse_position = Vector2(0.0, 0.0)
        self._mouse_scroll = Vector2(0.0, 0.0)

    def on_key(self, key, action) -> None:
        """Record a key press or release; other actions are ignored."""
        action = int(action)
        if action == KeyAction.PRESS:
            self._keys[int(key)] = _KeyState(down=True, pressed=True, up=False)
        elif action == KeyAction.RELEASE:
            self._keys[int(key)] = _KeyState(down=False, pressed=False, up=True)

    def on_mouse_button(self, button, action) -> None:
        """Record a mouse button event; buttons share the key table."""
        self.on_key(button, action)

    def on_mouse_position(self, x, y) -> None:
        """Record the cursor position."""
        self._mouse_position = Vector2(float(x), float(y))

    def on_mouse_scroll(self, delta_x, delta_y) -> None:
        """Record the scroll offset of this frame."""
        self._mouse_scroll = Vector2(float(delta_x), float(delta_y))

    def poll_events(self) -> None:
        """Start a frame: remember the cursor position and reset scrolling."""
        self._mouse_last = self._mouse_position.copy()
        self._mouse_scroll = Vector2(0.0, 0.0)

    def clear_events(self) -> None:
        """End a frame: drop the one-frame down and up flags."""
        for state in self._keys.values():
            state.down = False
            state.up = False

    def _state(self, key) -> _KeyState:
        return self._keys.get(int(key), _KeyState())

    def get_key(self, key) -> bool:
        """Whether the key is held."""
        return self._state(key).pressed

    def get_key_down(self, key) -> bool:
        """Whether the key went down this frame."""
        return self._state(key).down

    def get_key_up(self, key) -> bool:
        """Whether the key was released this frame."""
        return self._state(key).up

    def mouse_position(self) -> Vector2:
        """Current cursor position."""
        return self._mouse_position.copy()

    def mouse_delta(self) -> Vector2:
        """Cursor movement since the last poll_events."""
        return self._mouse_position - self._mouse_last

    def mouse_scroll(self) -> Vector2:
        """Scroll offset of this frame."""
        return self._mouse_scroll.copy()

    def set_cursor_lock(self, lock) -> None:
        """Lock or release the cursor."""
        self._cursor_locked = bool(lock)

    def cursor_locked(self) -> bool:
        """Whether the cursor is locked."""
        return self._cursor_locked