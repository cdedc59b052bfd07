"""
AnnotationConfig — frozen dataclass passed explicitly through the pipeline.

Replaces the implicit environment lookups of the domain allow-list and of the
stage-logging toggle.
"""
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable


def parse_domain_allow_list(raw: str) -> FrozenSet[str]:
    """Split a pipe-delimited list of domain substrings ("a.org|b.org")."""
    return frozenset(part.strip() for part in (raw or "").split("|") if part.strip())


@dataclass(frozen=True)
class AnnotationConfig:
    """Explicit configuration of the annotation engine."""

    # Accept only hits whose identifier contains one of these substrings.
    # Empty means every hit is accepted.
    domain_allow_list: FrozenSet[str] = field(default_factory=frozenset)
    log_stages: bool = False

    @classmethod
    def from_domains(cls, domains: Iterable[str], log_stages: bool = False) -> "AnnotationConfig":
        return cls(domain_allow_list=frozenset(d for d in domains if d), log_stages=log_stages)

    @classmethod
    def from_settings(cls) -> "AnnotationConfig":
        """Build the configuration from environment settings (.env)."""
        from abstract_annotator.config import settings

        return cls(
            domain_allow_list=parse_domain_allow_list(settings.ENTITY_DOMAINS),
            log_stages=settings.ANNOTATION_LOG,
        )

    def accepts(self, uri: str) -> bool:
        if not self.domain_allow_list:
            return True
        return any(domain in uri for domain in self.domain_allow_list)

    def to_dict(self) -> dict:
        return {
            "domain_allow_list": sorted(self.domain_allow_list),
            "log_stages": self.log_stages,
        }
