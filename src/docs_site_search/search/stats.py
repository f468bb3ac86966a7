"""Statistical helpers for BM25 style scoring.

Kept independent of the index structures so the formulas can be unit tested
on their own.
"""

from __future__ import annotations

from collections.abc import Mapping
import math


def average_field_length(lengths: Mapping[str, int]) -> float:
    """Return the mean token count of a field across documents."""
    if not lengths:
        return 0.0
    return sum(max(length, 0) for length in lengths.values()) / len(lengths)


def calculate_idf(doc_freq: int, total_docs: int, *, floor: float = 1e-6) -> float:
    """Return inverse document frequency, floored so it never goes negative.

    Terms present in most documents of a small corpus get a near-zero IDF
    instead of a negative one.
    """

    if total_docs <= 0:
        return 0.0
    df = max(0, min(doc_freq, total_docs))
    ratio = max((total_docs - df + 0.5) / (df + 0.5), floor)
    return max(math.log(ratio + floor) + 1.0, floor)


def bm25(tf: int, doc_length: int, avg_doc_length: float, *, k1: float = 1.2, b: float = 0.75) -> float:
    """Compute the BM25 term weight without IDF.

    The dl/avgdl ratio is capped at 4 so very long pages are not buried.
    """

    if tf <= 0:
        return 0.0
    normalized_length = min(doc_length / max(avg_doc_length, 1e-9), 4.0)
    denominator = tf + k1 * (1 - b + b * normalized_length)
    return (tf * (k1 + 1)) / denominator
