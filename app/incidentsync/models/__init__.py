from .incident import Entry, Incident

__all__ = ["Entry", "Incident"]
