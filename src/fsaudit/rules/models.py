"""Rule data model — names and extensions mapped to a classification."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from fsaudit.classification.models import Classification, DirectoryClassification


@dataclass
class ClassificationRule:
    """A single classification rule.

    ``file_names`` match the whole final path component; ``extensions`` match
    the final suffix without its dot. Both are compared lowercased.
    ``sniff_delimiter`` marks rules whose result needs the file's content.
    """

    id: str
    name: str
    description: str
    classification: Classification
    file_names: List[str] = field(default_factory=list)
    extensions: List[str] = field(default_factory=list)
    sniff_delimiter: bool = False

    def __post_init__(self) -> None:
        self.file_names = [n.lower() for n in self.file_names]
        self.extensions = [e.lower().lstrip(".") for e in self.extensions]

    @property
    def is_directory_rule(self) -> bool:
        return isinstance(self.classification, DirectoryClassification)
