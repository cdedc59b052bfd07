"""
Segment — one contiguous run of annotated output.

Plain segments carry text only; entity segments also carry the primary
identifier/label used for the pop-over link and the full lists for
multi-source display.
"""
from dataclasses import dataclass, field
from typing import Tuple

from abstract_annotator.config.constants import SEGMENT_ENTITY, SEGMENT_PLAIN


@dataclass(frozen=True)
class Segment:
    """A plain-text run or a highlighted entity span (end is exclusive)."""

    kind: str
    text: str
    start: int
    end: int
    entity_text: str = ""
    uris: Tuple[str, ...] = field(default_factory=tuple)
    labels: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def plain(cls, text: str, start: int, end: int) -> "Segment":
        return cls(kind=SEGMENT_PLAIN, text=text[start:end], start=start, end=end)

    @property
    def is_entity(self) -> bool:
        return self.kind == SEGMENT_ENTITY

    @property
    def uri(self) -> str:
        return self.uris[0] if self.uris else ""

    @property
    def label(self) -> str:
        return self.labels[0] if self.labels else ""

    def to_dict(self) -> dict:
        data = {
            "kind": self.kind,
            "text": self.text,
            "start": self.start,
            "end": self.end,
        }
        if self.is_entity:
            data.update(
                {
                    "entity_text": self.entity_text,
                    "uri": self.uri,
                    "label": self.label,
                    "uris": list(self.uris),
                    "labels": list(self.labels),
                }
            )
        return data
