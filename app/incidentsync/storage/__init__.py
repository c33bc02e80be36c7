from .state import load_incidents, save_incidents

__all__ = ["load_incidents", "save_incidents"]
