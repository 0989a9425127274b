"""Binding-shaped entry points for embedding luadump.

Both functions swallow syntax errors: callers at this boundary only care
whether a member list exists.

    generate_module_dump_pairs: [[name, kind], ...], empty list on failure
    generate_module_dump_js:    [[name, kind], ...], None on failure
"""

from __future__ import annotations

from luadump.application.services import analyze_source


def generate_module_dump_pairs(code: str) -> list[list[str]]:
    """In-process binding: member pairs, [] when no shape or invalid syntax."""
    return generate_module_dump_js(code) or []


def generate_module_dump_js(code: str) -> list[list[str]] | None:
    """Bridge binding: member pairs, None when no shape or invalid syntax."""
    members = analyze_source(code).members
    if members is None:
        return None
    return members.to_pairs()
