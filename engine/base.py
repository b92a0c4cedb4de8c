from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Occurrence:
    """How many times a keyword appears in one document."""

    document: str
    frequency: int

    def __post_init__(self) -> None:
        if self.frequency < 0:
            raise ValueError(f"negative frequency {self.frequency} for {self.document!r}")


class DuplicateDocumentError(ValueError):
    def __init__(self, document: str) -> None:
        super().__init__(f"document already indexed: {document}")
        self.document = document
