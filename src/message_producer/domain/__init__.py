"""Domain layer: the producer message and the formats it is rendered in.

Nothing here performs I/O or imports a framework.
"""

from __future__ import annotations

from .behaviors import MESSAGE, produce
from .formats import OutputFormat

__all__ = ["MESSAGE", "OutputFormat", "produce"]
