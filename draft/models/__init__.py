from .pick import Pick

__all__ = ["Pick"]
