"""Reporters for enum definitions.

PlainTextReporter uses stdlib only; ConsoleReporter renders with rich.
"""

from enumkit.application.reporters._base import BaseReporter
from enumkit.application.reporters.console import ConsoleConfig, ConsoleReporter
from enumkit.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
]
