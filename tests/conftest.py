"""Pytest configuration and fixtures."""

import pytest

from bioseq_tools.external import AlignmentBackend, AlignmentConfig


class RecordingBackend(AlignmentBackend):
    """Backend that records its calls and returns canned lines."""

    def __init__(self, lines=None, error=None):
        self.lines = lines if lines is not None else ["QUERY  ACGT", "       ||||", "SUBJ   ACGT"]
        self.error = error
        self.calls = []

    def run(self, config, query, subject):
        self.calls.append((config, query, subject))
        if self.error is not None:
            raise self.error
        return list(self.lines)


class FakeHost:
    """In-memory editor host."""

    def __init__(self, selection=""):
        self.selection = selection
        self.shown = []
        self.searches = []
        self.errors = []

    def get_selection(self):
        return self.selection

    def search(self, pattern):
        self.searches.append(pattern)

    def show(self, lines):
        self.shown.append(list(lines))

    def error(self, message):
        self.errors.append(message)


@pytest.fixture
def sample_dna_sequence():
    """Return a sample DNA sequence for testing."""
    return "ATCGATCGATCGATCGATCG"


@pytest.fixture
def default_config():
    """Return the default alignment configuration."""
    return AlignmentConfig()


@pytest.fixture
def recording_backend():
    """Return a backend that records calls."""
    return RecordingBackend()


@pytest.fixture
def fake_host():
    """Return an in-memory host with an empty selection."""
    return FakeHost()
