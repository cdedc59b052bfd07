"""
Entity model for normalized named-entity annotations.

Positions are inclusive: an entity occupies [start_pos, end_pos] in the
abstract text, with end_pos always derived from start_pos and the text length.
"""
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Entity:
    """A named entity with every identifier/label pair detected at its span."""

    text: str
    start_pos: int
    uris: Tuple[str, ...] = field(default_factory=tuple)
    labels: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples so records stay immutable
        object.__setattr__(self, "uris", tuple(self.uris))
        object.__setattr__(self, "labels", tuple(self.labels))
        if len(self.uris) != len(self.labels):
            raise ValueError(
                f"uris and labels must be paired, got {len(self.uris)} uris "
                f"and {len(self.labels)} labels for '{self.text}'"
            )

    @property
    def end_pos(self) -> int:
        """Index of the last character of the entity."""
        return self.start_pos + len(self.text) - 1

    @property
    def primary_uri(self) -> str:
        return self.uris[0] if self.uris else ""

    @property
    def primary_label(self) -> str:
        return self.labels[0] if self.labels else ""

    def overlaps(self, other: "Entity") -> bool:
        """Check if two entities have overlapping spans."""
        return not (self.end_pos < other.start_pos or other.end_pos < self.start_pos)

    def span_length(self) -> int:
        return len(self.text)

    def merge_key(self) -> Tuple[str, int]:
        """Key under which duplicate detections are grouped."""
        return (self.text.lower(), self.start_pos)

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "startPos": self.start_pos,
            "endPos": self.end_pos,
            "uris": list(self.uris),
            "labels": list(self.labels),
        }

    def __repr__(self) -> str:
        return f"Entity('{self.text}', [{self.start_pos},{self.end_pos}], {list(self.uris)})"
