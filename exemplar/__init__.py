"""Exemplar -- example project scaffolding and documentation generation."""

__version__ = "1.0.0"
