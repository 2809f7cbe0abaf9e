"""
Overlay Control - discrete UI actions for the overlay engine.

Public API:
    CommandRegistry: Explicit command registration
    CommandNotAvailableError: Raised for unregistered commands
    CommandDispatcher: Payload decoding + delegation
    register_editor_commands: Bind builder actions to a GeometryEditor
"""

from .registry import CommandRegistry, CommandNotAvailableError
from .dispatcher import CommandDispatcher
from .bindings import EditorCommandHandlers, register_editor_commands

__all__ = [
    'CommandRegistry',
    'CommandNotAvailableError',
    'CommandDispatcher',
    'EditorCommandHandlers',
    'register_editor_commands',
]

__version__ = "1.0.0"
