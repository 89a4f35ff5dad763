# src/osu_kit/parsers/base.py

from abc import ABC, abstractmethod
from collections.abc import Iterable

from .config import SectionSelector
from .models import Document

LineSource = Iterable[str] | Iterable[bytes]


class DocumentParser(ABC):
    @abstractmethod
    def parse(
        self, source: LineSource, config: SectionSelector | None = None
    ) -> Document:
        """
        Parse a line source and return a typed document.

        Requirements:
        - Single forward pass, no look-ahead beyond the current line
        - Deterministic output for same input
        - Recoverable problems end up in ``Document.diagnostics``, never raised
        """
        raise NotImplementedError
