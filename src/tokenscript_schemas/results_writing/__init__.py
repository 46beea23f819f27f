"""Results writing domain exports."""

from .bundle_report import (
    format_dependency_tree,
    format_dry_run_output,
    format_list_output,
    format_preset_info,
)

__all__ = [
    "format_dependency_tree",
    "format_dry_run_output",
    "format_list_output",
    "format_preset_info",
]
