#!/usr/bin/env python3
"""
Test configuration and fixtures for segchain tests
"""

import os

import pytest

from segchain.core.context import ApplicationContext
from segchain.models import Chain, Segment


@pytest.fixture(autouse=True)
def clean_context(monkeypatch):
    """Fresh configuration for every test, free of SEGCHAIN_ overrides"""
    for key in list(os.environ):
        if key.startswith("SEGCHAIN_"):
            monkeypatch.delenv(key)
    ApplicationContext.reset()
    yield
    ApplicationContext.reset()


@pytest.fixture
def make_chain():
    """Factory building a chain from (start, end) pairs"""
    def _make(*bounds):
        return Chain(Segment(start, end) for start, end in bounds)
    return _make


@pytest.fixture
def exon_chain(make_chain):
    """Three blocks with gaps: 1-5, 10-15, 20-25"""
    return make_chain((1, 5), (10, 15), (20, 25))
