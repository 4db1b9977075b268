from rualias.api import aliases

__all__ = ["aliases"]
