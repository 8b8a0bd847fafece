"""Building blocks for Markdown parsers: rule ordering, source maps, text utilities and link parsing."""

__version__ = "0.1.0"
__all__ = ["links", "ruler", "sourcemap", "typekey", "utils"]