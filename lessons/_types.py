"""
Core type definitions for lessons.

Aliases shared between the topic packages.
"""

from __future__ import annotations

from collections.abc import Callable

from ._errors import LoadError

# ============================================================================
# Type aliases
# ============================================================================

# NodeCallback = error-first continuation: (error, None) or (None, data)
type NodeCallback = Callable[[LoadError | None, str | None], None]

# Report = sink for a single console line
type Report = Callable[[str], None]

__all__ = (
    "NodeCallback",
    "Report",
)
