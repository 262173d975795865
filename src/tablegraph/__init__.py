"""
Foreign key relationship graphs from table CSV descriptions.
"""

from .errors import TableGraphError
from .schema import GraphConfig, OutputType, TableRecord
from .visualization.backends import D3Backend, DotBackend, GraphBackend, create_backend
from .workflows import GraphAssembler

__version__ = "0.1.0"
__all__ = [
    "TableGraphError",
    "GraphConfig",
    "OutputType",
    "TableRecord",
    "GraphBackend",
    "DotBackend",
    "D3Backend",
    "create_backend",
    "GraphAssembler",
]
