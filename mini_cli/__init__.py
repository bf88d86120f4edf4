"""mini: a tiny command-line utility to list directories and show files.

Subcommands are exposed through ``mini_cli.cli``; keep ``__all__`` limited to
the version string.
"""

__version__ = "1.0.0"

__all__: list[str] = ["__version__"]
