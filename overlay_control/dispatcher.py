"""
CommandDispatcher - routes host UI action payloads to the CommandRegistry

Bounded Context: Host UI -> editor action delivery
Responsibilities:
  - Decode payloads (JSON text/bytes or already-parsed dicts)
  - Extract and normalize the command name
  - Delegate to CommandRegistry and log the result

Payload format:
    {"command": "select", "id": "wifi-1"}

Failure policy:
  - Malformed JSON, non-object payloads and invalid values are logged
    as command.rejected, unknown commands as command.unavailable
  - Either way the result is None and the editor state is left untouched
"""

import json
from typing import Any, Dict, Optional, Union

from overlay_engine.logging import LogEvent, StructuredLogger, create_logger

from .registry import CommandNotAvailableError, CommandRegistry

Payload = Union[str, bytes, Dict[str, Any]]


class CommandDispatcher:
    """
    Entry point for discrete UI actions.

    Example:
        registry = CommandRegistry()
        register_editor_commands(registry, editor)
        dispatcher = CommandDispatcher(registry)

        dispatcher.dispatch('{"command": "start", "shape_type": "polygon"}')
        dispatcher.dispatch({"command": "add_point", "lat": 24.72, "lng": 46.67})
    """

    def __init__(
        self,
        command_registry: Optional[CommandRegistry] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        self.command_registry = command_registry or CommandRegistry()
        self._logger = logger or create_logger("control")

    def dispatch(self, payload: Payload) -> Optional[Any]:
        """
        Execute one action payload.

        Returns:
            The handler result, or None when the payload was rejected
        """
        try:
            command_data = self._decode(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            self._logger.error(
                event=LogEvent.COMMAND_REJECTED,
                message=f"Error decoding payload: {e}",
                exc_info=e,
            )
            return None

        if not isinstance(command_data, dict):
            self._logger.warning(
                event=LogEvent.COMMAND_REJECTED,
                message=f"Payload must be an object, got {type(command_data).__name__}",
            )
            return None

        command = str(command_data.get('command', '')).strip().lower()
        if not command:
            self._logger.warning(
                event=LogEvent.COMMAND_REJECTED,
                message="Empty command received",
            )
            return None

        try:
            result = self.command_registry.execute(command, command_data)
        except CommandNotAvailableError as e:
            self._logger.warning(
                event=LogEvent.COMMAND_UNAVAILABLE,
                message=str(e),
                metadata={'available': sorted(self.command_registry.available_commands)},
            )
            return None
        except ValueError as e:
            self._logger.warning(
                event=LogEvent.COMMAND_REJECTED,
                message=f"Invalid payload for '{command}': {e}",
                metadata={'command': command},
            )
            return None

        self._logger.debug(
            event=LogEvent.COMMAND_EXECUTED,
            message=f"Command '{command}' executed",
            metadata={'command': command, 'accepted': bool(result) if result is not None else None},
        )
        return result

    @staticmethod
    def _decode(payload: Payload) -> Any:
        if isinstance(payload, bytes):
            payload = payload.decode('utf-8')
        if isinstance(payload, str):
            return json.loads(payload)
        return payload
