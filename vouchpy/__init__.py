"""vouchpy — Python ecosystem extension: lockfile discovery and PyPI metadata."""

from vouchpy.extension import PyExtension

__all__ = ["PyExtension"]
