"""Key bindings shared by the frontends."""

from typing import Dict, Optional

from ..core.board import DEFAULT_ALIVE_PROBABILITY
from ..core.controller import Clear, Command, Randomize, StepOnce, ToggleRunning

SPACE = "space"


def build_keymap(randomize_probability: float = DEFAULT_ALIVE_PROBABILITY) -> Dict[str, Command]:
    """Create the key-to-command table.

    Args:
        randomize_probability: Alive probability used by the reseed key

    Returns:
        Mapping of lowercase key names to commands
    """
    return {
        SPACE: ToggleRunning(),
        "r": Randomize(randomize_probability),
        "c": Clear(),
        "s": StepOnce(),
    }


DEFAULT_KEYMAP = build_keymap()


def command_for_key(key: str, keymap: Optional[Dict[str, Command]] = None) -> Optional[Command]:
    """Look up the command bound to a key.

    Keys are matched case-insensitively and a literal " " counts as space.

    Returns:
        The bound command, or None for unbound keys
    """
    if keymap is None:
        keymap = DEFAULT_KEYMAP
    name = SPACE if key == " " else key.lower()
    return keymap.get(name)
