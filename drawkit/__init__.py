"""drawkit: seedable random sampling helpers and string utilities."""

__version__ = "0.1.0"
