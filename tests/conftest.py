"""
Pytest configuration for postfix evaluator tests.
"""

import io

import pytest

from core import Tokenizer


class BrokenStream:
    """Stream whose reads fail after yielding a prefix."""

    def __init__(self, prefix="", exc=OSError("device not ready")):
        self._chars = list(prefix)
        self._exc = exc

    def read(self, size=-1):
        if self._chars:
            return self._chars.pop(0)
        raise self._exc


@pytest.fixture
def make_tokenizer():
    """Build a Tokenizer over an in-memory text stream."""
    def _make(text, **kwargs):
        return Tokenizer(io.StringIO(text), **kwargs)
    return _make


@pytest.fixture
def broken_stream():
    return BrokenStream
