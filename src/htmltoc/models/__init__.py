from __future__ import annotations

from htmltoc.models.heading import Heading, ScanResult

__all__ = [
    "Heading",
    "ScanResult",
]
