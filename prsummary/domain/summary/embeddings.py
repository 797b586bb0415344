"""Embedding vector normalization and encoding"""

import base64
import json
import math
from typing import List, Sequence


class EmbeddingError(ValueError):
    """Raised when an embedding vector cannot be normalized"""
    pass


def magnitude(vector: Sequence[float]) -> float:
    """Euclidean length of the vector"""
    return math.hypot(*vector)


def normalize(vector: Sequence[float]) -> List[float]:
    """Scale the vector to unit length"""
    length = magnitude(vector)
    if length == 0 or not math.isfinite(length):
        raise EmbeddingError(f"Cannot normalize a vector of magnitude {length}")
    return [v / length for v in vector]


def encode_embedding(vector: Sequence[float]) -> str:
    """Normalize, serialize as compact JSON and base64 encode"""
    payload = json.dumps(normalize(vector), separators=(',', ':'))
    return base64.b64encode(payload.encode('utf-8')).decode('ascii')
