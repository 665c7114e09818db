"""Reporters for discovered workspaces.

ConsoleReporter renders with rich and returns a string.
JSONReporter writes machine-readable output to a stream.
"""

from reactorscan.application.reporters._base import BaseReporter
from reactorscan.application.reporters.console import ConsoleConfig, ConsoleReporter
from reactorscan.application.reporters.json_reporter import JSONReporter
from reactorscan.application.reporters.protocol import ReporterProtocol

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "ReporterProtocol",
]
