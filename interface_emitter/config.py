"""Render options for generated interfaces."""

from dataclasses import dataclass

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class RenderOptions:
    """Knobs that change the layout of rendered text, not its structure."""

    indent_width: int = 4
    generator_name: str = "AutomaticInterface"
    generator_version: str = ""
    newline: str = "\n"

    def __post_init__(self) -> None:
        if self.indent_width <= 0:
            raise ConfigurationError(
                f"indent_width must be positive, got {self.indent_width}"
            )
        if not self.newline:
            raise ConfigurationError("newline must not be empty")


DEFAULT_OPTIONS = RenderOptions()
