"""Confidence-aware classification of topic vote tallies."""

from content_warnings.classifier.classifier import VoteClassifier, classify_vote
from content_warnings.classifier.models import Category, WilsonInterval
from content_warnings.classifier.wilson import wilson_interval, z_for_confidence


__all__ = [
    "Category",
    "VoteClassifier",
    "WilsonInterval",
    "classify_vote",
    "wilson_interval",
    "z_for_confidence",
]
