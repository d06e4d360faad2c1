"""Builds the candidate word from a visit sequence."""
import logging
from typing import Optional, Sequence

from .reducer import KeyVisit

logger = logging.getLogger(__name__)


def build_word(visits: Sequence[KeyVisit], threshold: float) -> Optional[str]:
    """
    Concatenate the keys of confident visits, lower-cased, in visit order.

    Returns None (not "") when no visit is above threshold.
    """
    kept = [v for v in visits if v.confidence > threshold]
    if len(kept) < len(visits):
        logger.debug("Dropped %d low-confidence visit(s)", len(visits) - len(kept))
    if not kept:
        return None
    return "".join(v.key.lower() for v in kept)
