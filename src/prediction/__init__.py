"""
SwipeType Prediction Module

Edit-distance ranking of decoded words against a dictionary.
"""
from .dictionary import load_dictionary, DEFAULT_DICTIONARY_PATH
from .ranker import levenshtein_distance, rank_suggestions

__all__ = [
    'load_dictionary',
    'DEFAULT_DICTIONARY_PATH',
    'levenshtein_distance',
    'rank_suggestions',
]
