"""Reporters for analysis outcomes.

JsonReporter: golden-file and RPC wire format.
ConsoleReporter: rich rendering for humans.
"""

from luadump.application.reporters.console import ConsoleReporter
from luadump.application.reporters.json import JsonReporter, to_json_value

__all__ = [
    "ConsoleReporter",
    "JsonReporter",
    "to_json_value",
]
