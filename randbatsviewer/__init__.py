"""Terminal browser for Pokemon Showdown random battle movesets.

``main`` runs the command-line entrypoint; the selector, view-model, and
catalog layers are importable on their own for scripting.
"""

from __future__ import annotations

__version__ = "0.1.0"


def main(*args, **kwargs):
    """Lazily import CLI entrypoint so library imports skip terminal setup."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["__version__", "main"]
