"""TypeScript class/interface type dependency graph."""

__version__ = "0.1.0"
