"""Document lifecycle and painting value types."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class DocumentState(str, Enum):
    """Canvas lifecycle: created -> composing -> finalized."""

    CREATED = "created"
    COMPOSING = "composing"
    FINALIZED = "finalized"


class PaintStyle(str, Enum):
    """How a closed shape is painted."""

    FILL = "F"
    STROKE = "D"
    FILL_STROKE = "DF"


@dataclass(frozen=True)
class DocumentMetadata:
    """Info dictionary written into the PDF."""

    title: str
    author: str
    subject: str
    keywords: str
    creation_date: datetime
