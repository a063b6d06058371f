"""Player commands and the key bindings that produce them."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

import pygame


class Command(str, Enum):
    """Discrete actions the controller accepts."""

    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE = "rotate"


KEY_BINDINGS: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
}

# Key identifiers as delivered by browser ``keydown`` events.
KEY_NAMES: Dict[str, Command] = {
    "ArrowLeft": Command.MOVE_LEFT,
    "ArrowRight": Command.MOVE_RIGHT,
    "ArrowDown": Command.SOFT_DROP,
    "ArrowUp": Command.ROTATE,
}


def command_for_key(key: int) -> Optional[Command]:
    """Return the command bound to the pygame key code ``key``, if any."""

    return KEY_BINDINGS.get(key)


def command_for_key_name(name: str) -> Optional[Command]:
    """Return the command bound to a browser-style key name, if any."""

    return KEY_NAMES.get(name)
