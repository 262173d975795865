from .assembly import GraphAssembler

__all__ = ["GraphAssembler"]
