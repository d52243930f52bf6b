"""Design-system component suggester: query resolution, snippet assembly and search analytics."""

__version__ = "0.1.0"
