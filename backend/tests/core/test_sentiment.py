"""Memory Sentiment — keyword-count heuristic."""

import pytest

from nestwell.core.domain_types import Sentiment
from nestwell.core.sentiment import analyze_sentiment


@pytest.mark.parametrize("text, expected", [
    ("We had a wonderful day at the beach", Sentiment.POSITIVE),
    ("LOVE this amazing place", Sentiment.POSITIVE),
    ("A sad and frustrated evening", Sentiment.NEGATIVE),
    ("great food but awful service", Sentiment.NEUTRAL),
    ("We went shopping", Sentiment.NEUTRAL),
    ("", Sentiment.NEUTRAL),
])
def test_analyze_sentiment(text, expected):
    assert analyze_sentiment(text) is expected


def test_punctuation_attached_to_a_keyword_does_not_match():
    assert analyze_sentiment("love!") is Sentiment.NEUTRAL
