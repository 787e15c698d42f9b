"""
Formatter interface for generated modules.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..config import FormatterConfig


class Formatter(ABC):
    """Post-processes a generated module with an external code formatter."""

    # Name used in the "backend" setting and in log messages
    name: str = ""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the underlying tool can be run in this environment."""

    @abstractmethod
    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Reformat a generated module.

        Only called once is_available() returned True; a formatter that
        fails on its input returns the code unchanged.

        Args:
            code: Generated Python source
            config: Formatter settings

        Returns:
            The formatted source
        """
