"""
Utility helpers for relparse.

This package provides reusable utilities used across relparse:

- Namespaced logger retrieval
- Build hash detection

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from relparse.utils.logger import get_logger

# ---------------------------------------------------------------------------
# Build hash utilities
# ---------------------------------------------------------------------------

from relparse.utils.build_hash import is_build_hash

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    # Logging
    "get_logger",
    # Build hashes
    "is_build_hash",
]
