"""Content analysis package.

Tokenization and stop-word helpers plus the keyword density and readability
analyzers that run over raw text.
"""

from .text_utils import STOP_WORDS, tokenize, is_stop_word, count_syllables
from .keywords import analyze_keywords
from .readability import score_readability
