"""
Exceptions raised while turning a table CSV into a relationship graph.

Every error is fatal: nothing below the CLI recovers from them.
"""


class TableGraphError(Exception):
    """Base class for all tablegraph failures."""


class InputOpenError(TableGraphError):
    """The input CSV could not be opened."""


class CsvParseError(TableGraphError):
    """A CSV row could not be parsed."""


class FieldConversionError(TableGraphError):
    """The relation size of a table is not a non-negative integer."""


class JsonParseError(TableGraphError):
    """The foreign key blob of a table is not a JSON object of strings."""


class ConstructionError(TableGraphError):
    """The backend rejected a node or an edge."""


class OutputCreateError(TableGraphError):
    """The output file could not be created."""


class RenderError(TableGraphError):
    """The graph could not be serialized."""


class UnknownOutputTypeError(TableGraphError):
    """No backend is registered for the requested output type."""


class ConfigurationError(TableGraphError):
    """The command-line options do not form a valid run configuration."""
