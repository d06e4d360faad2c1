"""
Word list loading for suggestion ranking.
Supports JSON (word -> frequency rank) and plain text (one word per line).
"""
import json
import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_DICTIONARY_PATH = Path(__file__).parent / "dictionary.json"

# Used when the dictionary file is missing
FALLBACK_WORDS = ["the", "to", "and", "a", "of"]


def _dedupe(words) -> List[str]:
    seen = set()
    result = []
    for word in words:
        word = word.strip().lower()
        if word and word not in seen:
            seen.add(word)
            result.append(word)
    return result


def load_dictionary(path: Optional[Path] = None) -> List[str]:
    """
    Load a dictionary as a list of lowercase words in preference order.

    Args:
        path: .json or .txt file. If None, uses the bundled dictionary.json.
              In a JSON object, lower rank means more frequent; a JSON list
              is taken in file order. Text lines starting with '#' are
              comments.

    Returns:
        Unique words, most preferred first.
    """
    path = Path(path) if path is not None else DEFAULT_DICTIONARY_PATH

    if not path.exists():
        logger.warning("Dictionary not found at %s, using fallback words", path)
        return list(FALLBACK_WORDS)

    suffix = path.suffix.lower()
    if suffix == ".json":
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if isinstance(data, dict):
            words = sorted(data, key=lambda w: data[w])
        else:
            words = list(data)
    elif suffix == ".txt":
        with open(path, 'r', encoding='utf-8') as f:
            words = [line for line in f if not line.lstrip().startswith("#")]
    else:
        raise ValueError(f"Unsupported dictionary format: {path.suffix!r}")

    words = _dedupe(words)
    logger.info("Loaded %d words from %s", len(words), path)
    return words
