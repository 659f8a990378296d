"""Cohen-Sutherland line clipping, a stepwise animator and a Tk visualiser."""

__version__ = "0.1.0"
__all__ = ["__version__"]