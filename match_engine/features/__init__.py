"""Shared feature extraction: feature vectors for distance, tokens for the classifier."""

from .extractor import FeatureVector, experience_bucket, extract_candidate_features, extract_features
from .tokens import duration_bucket, salary_bucket, stipend_bucket, tokenize

__all__ = [
    "FeatureVector",
    "experience_bucket",
    "extract_candidate_features",
    "extract_features",
    "duration_bucket",
    "salary_bucket",
    "stipend_bucket",
    "tokenize",
]
