"""Memory Sentiment — keyword-count heuristic over memory text.

Invariants:
    - Pure and deterministic: same text, same Sentiment
    - Ties (including no keywords) are neutral

Design Decisions:
    - Whole-word, case-insensitive matching on whitespace-split tokens; punctuation
      attached to a word means no match ("love!" is not "love")
"""

from nestwell.core.domain_types import Sentiment

POSITIVE_WORDS = frozenset({
    "love", "happy", "joy", "wonderful", "amazing",
    "beautiful", "great", "fantastic", "perfect", "best",
})
NEGATIVE_WORDS = frozenset({
    "sad", "angry", "frustrated", "disappointed", "terrible",
    "awful", "bad", "worst", "hate", "horrible",
})


def analyze_sentiment(text: str) -> Sentiment:
    words = text.lower().split()
    positive = sum(1 for w in words if w in POSITIVE_WORDS)
    negative = sum(1 for w in words if w in NEGATIVE_WORDS)
    if positive > negative:
        return Sentiment.POSITIVE
    if negative > positive:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL
