"""Source model, diagnostics, lore, directives and option grammar for resolving shell command references."""

__version__ = "0.0.1"