"""Bundle artifacts: named stylesheet and program outputs handed over by a bundler."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath

__all__ = ["Artifact", "ArtifactKind", "classify_artifact"]

_PROGRAM_SUFFIXES = frozenset({".js", ".mjs", ".cjs", ".jsx"})


class ArtifactKind(Enum):
    """What an artifact's text holds."""

    STYLESHEET = "stylesheet"
    PROGRAM = "program"
    OTHER = "other"


def classify_artifact(name: str) -> ArtifactKind:
    """Pick an artifact kind from the file extension of *name*."""
    suffix = PurePosixPath(name).suffix.lower()
    if suffix == ".css":
        return ArtifactKind.STYLESHEET
    if suffix in _PROGRAM_SUFFIXES:
        return ArtifactKind.PROGRAM
    return ArtifactKind.OTHER


@dataclass
class Artifact:
    """A named output whose text is replaced after minification.

    Attributes:
        name: Output file name, relative to the bundle root.
        kind: Whether the text is a stylesheet or a program chunk.
        text: Current contents; overwritten in place by the bundle pass.
    """

    name: str
    kind: ArtifactKind
    text: str

    @classmethod
    def from_name(cls, name: str, text: str) -> Artifact:
        return cls(name=name, kind=classify_artifact(name), text=text)

    @property
    def is_stylesheet(self) -> bool:
        return self.kind is ArtifactKind.STYLESHEET

    @property
    def is_program(self) -> bool:
        return self.kind is ArtifactKind.PROGRAM
