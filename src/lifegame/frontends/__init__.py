"""Frontend hosts that drive a life-game session."""

from .keymap import DEFAULT_KEYMAP, build_keymap, command_for_key

__all__ = ["DEFAULT_KEYMAP", "build_keymap", "command_for_key"]
