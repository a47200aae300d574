"""Base class for text commands."""

from abc import ABC, abstractmethod
from typing import Any


class Command(ABC):
    """
    Abstract base class for chat text commands.

    A command declares its arguments as a flat JSON-schema object, checks
    incoming arguments against it and returns a reply body.
    """

    _TYPE_MAP = {
        "string": str,
    }

    @property
    @abstractmethod
    def name(self) -> str:
        """Command name used in invocations."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Description of what the command does."""
        pass

    @property
    @abstractmethod
    def parameters(self) -> dict[str, Any]:
        """JSON Schema for command parameters."""
        pass

    @abstractmethod
    async def execute(self, **kwargs: Any) -> str:
        """
        Execute the command with given parameters.

        Args:
            **kwargs: Command-specific parameters.

        Returns:
            Reply body.
        """
        pass

    def validate_params(self, params: dict[str, Any]) -> list[str]:
        """Check required keys, value types and string lengths. Returns error list."""
        schema = self.parameters or {}
        props = schema.get("properties", {})

        errors = [f"missing required {key}" for key in schema.get("required", []) if key not in params]
        for key, value in params.items():
            prop = props.get(key)
            if prop is None:
                continue
            expected = self._TYPE_MAP.get(prop.get("type"))
            if expected is not None and not isinstance(value, expected):
                errors.append(f"{key} should be {prop['type']}")
                continue
            min_length = prop.get("minLength")
            if isinstance(value, str) and min_length is not None and len(value.strip()) < min_length:
                errors.append(f"{key} must be at least {min_length} chars")
        return errors

    def to_schema(self) -> dict[str, Any]:
        """Convert command to a registration schema."""
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.parameters,
        }
