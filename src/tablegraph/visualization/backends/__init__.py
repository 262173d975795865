"""
Output backends for table relationship graphs.
"""

from .base import GraphBackend, create_backend, list_backends, register_backend
from .d3 import D3Backend
from .dot import DotBackend

__all__ = [
    "GraphBackend",
    "create_backend",
    "list_backends",
    "register_backend",
    "D3Backend",
    "DotBackend",
]
