from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

from htmltoc.slug import slugify


class Heading(BaseModel):
    """Single heading found while scanning a document."""

    model_config = ConfigDict(frozen=True)

    line: str  # Original line, before the id attribute is added
    index: int = Field(ge=0)  # 0-based position in the document
    level: int = Field(ge=1, le=6)
    text: str

    @property
    def anchor(self) -> str:
        return slugify(self.text)


@dataclass
class ScanResult:
    """Output of a single scan pass over a document.

    ``lines`` is a fresh list; the scanned input is never modified.
    """

    lines: list[str]
    headings: list[Heading] = field(default_factory=list)
    anchor_index: int = 0
