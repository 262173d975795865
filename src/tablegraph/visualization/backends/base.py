"""
Graph backend base class and registry.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, TextIO, Type, Union

from ...errors import UnknownOutputTypeError
from ...schema import DEFAULT_TITLE, OutputType


class GraphBackend(ABC):
    """Builds a graph of tables and serializes it to one output format."""

    #: Extension appended to the output base name
    extension: str = ""

    def __init__(self, title: str = DEFAULT_TITLE):
        self.title = title

    @abstractmethod
    def add_node(self, name: str, weight: int) -> None:
        """
        Add a table node.

        Args:
            name: Table name, also the node identity
            weight: Row count of the table
        """
        pass

    @abstractmethod
    def add_edge(self, source: str, target: str, label: str) -> bool:
        """
        Add a directed foreign key edge.

        Args:
            source: Referencing table
            target: Referenced table
            label: Foreign key column name

        Returns:
            False if the edge already existed and nothing was added
        """
        pass

    @abstractmethod
    def render(self, sink: TextIO) -> None:
        """Write the complete serialized graph to ``sink``."""
        pass

    @abstractmethod
    def node_count(self) -> int:
        pass

    @abstractmethod
    def edge_count(self) -> int:
        pass


# Global backend registry
_backends: Dict[OutputType, Type[GraphBackend]] = {}


def register_backend(output_type: OutputType):
    """Decorator to register a backend implementation."""
    def decorator(backend_cls: Type[GraphBackend]) -> Type[GraphBackend]:
        _backends[output_type] = backend_cls
        return backend_cls
    return decorator


def create_backend(
    output_type: Union[OutputType, str], title: str = DEFAULT_TITLE
) -> GraphBackend:
    """Create an empty backend for the given output type."""
    try:
        key = OutputType(output_type)
    except ValueError:
        raise UnknownOutputTypeError(f"unknown output type: {output_type}") from None
    if key not in _backends:
        raise UnknownOutputTypeError(f"unknown output type: {output_type}")
    return _backends[key](title=title)


def list_backends() -> List[str]:
    """Get list of available output types."""
    return [output_type.value for output_type in _backends]
