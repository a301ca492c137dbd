"""Presentation layer for CLI output formatting.

Components:
- render_commit_diff / render_file_diff: 'tweak show' text output
- render_log_entry / render_oneline: 'tweak log' text output
- JsonFormatter: JSON serialization of history and diffs
- TweakColors: shared color palette
"""

from tweak.core.presentation.colors import TweakColors, resolve_color_mode
from tweak.core.presentation.diff_renderer import render_commit_diff, render_file_diff
from tweak.core.presentation.json_formatter import JsonFormatter
from tweak.core.presentation.log_renderer import render_log_entry, render_oneline

__all__ = [
    "TweakColors",
    "resolve_color_mode",
    "render_commit_diff",
    "render_file_diff",
    "render_log_entry",
    "render_oneline",
    "JsonFormatter",
]
