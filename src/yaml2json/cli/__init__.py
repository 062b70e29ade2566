"""Command line interface for yaml2json.

``cli`` and ``main`` are resolved on first attribute access, so importing
``yaml2json.cli`` (for example from ``yaml2json.writers``) does not pull in
the click command, and ``python -m yaml2json.cli.main`` runs without a
duplicate module warning.
"""

__all__ = ["cli", "main"]


def __getattr__(name):  # pragma: no cover - trivial lazy import
    if name in {"cli", "main"}:
        from .main import cli as _cli
        from .main import main as _main

        return _cli if name == "cli" else _main
    raise AttributeError(name)
