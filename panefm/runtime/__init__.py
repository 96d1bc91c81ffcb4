"""Session runtime: state machine, requests, worker, terminal, and loop.

Entry points are imported lazily so ``panefm.render`` can import
``panefm.runtime.state`` without pulling in the whole runtime.
"""

from __future__ import annotations


def run_file_manager(*args, **kwargs):
    """Lazily import the bootstrap to avoid package-import cycles."""
    from .app import run_file_manager as _run_file_manager

    return _run_file_manager(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


__all__ = [
    "run_file_manager",
    "run_main_loop",
]
