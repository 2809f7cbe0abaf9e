"""
CommandRegistry - named builder actions of a map page

Bounded Context: Discrete UI actions (start/finish/cancel/clear/select/...)

A page exposes exactly the actions registered for it; anything else is
refused up front instead of silently doing nothing.

Command names are lowercase identifiers ("add_point", "toggle_edit").

Threading: Single consumer (the host UI event loop), no locking
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Set

_COMMAND_NAME = re.compile(r"^[a-z][a-z0-9_]*$")


class CommandNotAvailableError(Exception):
    """Raised when attempting to execute an unregistered command"""
    pass


@dataclass(frozen=True)
class RegisteredCommand:
    name: str
    handler: Callable[..., Any]
    description: str


class CommandRegistry:
    """
    Registry of named UI actions.

    Example:
        registry = CommandRegistry()
        registry.register('cancel', handlers.cancel, "Discard the shape being built")

        registry.execute('cancel')                               # -> Outcome
        registry.execute('select', {'command': 'select', 'id': 'wifi-1'})
    """

    def __init__(self):
        self._commands: Dict[str, RegisteredCommand] = {}

    def register(self, command: str, handler: Callable[..., Any], description: str) -> None:
        """
        Raises:
            ValueError: On a malformed name or a second registration
        """
        if not _COMMAND_NAME.match(command):
            raise ValueError(
                f"Invalid command name '{command}': use lowercase letters, digits and '_'"
            )
        if command in self._commands:
            raise ValueError(f"Command '{command}' already registered")

        self._commands[command] = RegisteredCommand(command, handler, description)

    def execute(self, command: str, command_data: Optional[Dict[str, Any]] = None) -> Any:
        """
        Run a registered command.

        The handler receives the payload when one is given, nothing
        otherwise.

        Raises:
            CommandNotAvailableError: If command not registered
        """
        registered = self._commands.get(command)
        if registered is None:
            raise CommandNotAvailableError(
                f"Command '{command}' not available. "
                f"Available commands: {', '.join(sorted(self._commands))}"
            )

        if command_data is None:
            return registered.handler()
        return registered.handler(command_data)

    def is_available(self, command: str) -> bool:
        return command in self._commands

    @property
    def available_commands(self) -> Set[str]:
        return set(self._commands)

    def get_help(self) -> Dict[str, str]:
        """Command name -> description, in registration order."""
        return {name: entry.description for name, entry in self._commands.items()}

    def count(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return f"CommandRegistry({', '.join(self._commands)})"
