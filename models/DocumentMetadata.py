from dataclasses import dataclass, field
from typing import Dict


@dataclass
class DocumentMetadata:
    """
    Document-level metadata as reported by the PDF library.
    """
    page_count: int                                       # Total number of pages
    info: Dict[str, str] = field(default_factory=dict)    # /Info fields keyed by PDF name
