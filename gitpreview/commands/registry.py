"""Command registry for text command dispatch."""

from typing import Any

from loguru import logger

from gitpreview.commands.base import Command


class CommandRegistry:
    """
    Registry for text commands.

    Allows dynamic registration and execution of commands.
    """

    def __init__(self):
        self._commands: dict[str, Command] = {}

    def register(self, command: Command) -> None:
        """Register a command."""
        self._commands[command.name] = command

    def unregister(self, name: str) -> None:
        """Unregister a command by name."""
        self._commands.pop(name, None)

    def get(self, name: str) -> Command | None:
        """Get a command by name."""
        return self._commands.get(name)

    def has(self, name: str) -> bool:
        """Check if a command is registered."""
        return name in self._commands

    def get_definitions(self) -> list[dict[str, Any]]:
        """Get all command definitions."""
        return [command.to_schema() for command in self._commands.values()]

    async def execute(self, name: str, params: dict[str, Any]) -> str:
        """
        Execute a command by name with given parameters.

        Args:
            name: Command name.
            params: Command parameters.

        Returns:
            Reply body, or an error message.
        """
        command = self._commands.get(name)
        if not command:
            return f"Error: Command '{name}' not found"

        try:
            errors = command.validate_params(params)
            if errors:
                return f"Error: Invalid parameters for command '{name}': " + "; ".join(errors)
            return await command.execute(**params)
        except Exception as e:
            logger.warning("Command {} failed: {}", name, e)
            return f"Error executing {name}: {str(e)}"

    @property
    def command_names(self) -> list[str]:
        """Get list of registered command names."""
        return list(self._commands.keys())

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: str) -> bool:
        return name in self._commands
