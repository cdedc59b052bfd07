"""
Abstract text cleanup applied before entity offsets are laid over the text.
"""
import logging
from typing import Optional

from abstract_annotator.config.constants import ABSTRACT_PREFIX

logger = logging.getLogger(__name__)


def clean_abstract_text(raw: Optional[str]) -> str:
    """
    Return the abstract text the entity offsets refer to.

    Some abstracts start with the word "Abstract " while the annotator computed
    offsets without it, so the prefix is removed. A missing abstract becomes "".
    """
    if raw is None:
        return ""
    if raw[: len(ABSTRACT_PREFIX)].lower() == ABSTRACT_PREFIX:
        logger.debug("Stripped leading '%s' from abstract", raw[: len(ABSTRACT_PREFIX)].strip())
        return raw[len(ABSTRACT_PREFIX):]
    return raw
