"""Terminal driver package: wraps the War engine with line input and text output."""

from .session import ConsoleSession, render

__all__ = ["ConsoleSession", "render"]
