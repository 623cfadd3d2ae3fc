"""Linux Universal Tool: menu-driven terminal front-end for host administration."""

from lunitool.__version__ import __version__

__all__ = ["__version__"]
