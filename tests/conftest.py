"""Shared fixtures for paragraph-wrap tests."""

import pytest


HELLO_TEXT = "Hello there, how are you this fine day?  I'm glad to hear it!"

SAMPLE_PARAGRAPH = (
    "This function wraps the input paragraph such that each line in the "
    "paragraph is at most width characters long. The wrap method returns "
    "a list of output lines. The returned list is empty if the wrapped "
    "output has no content."
)


@pytest.fixture
def hello_text():
    return HELLO_TEXT


@pytest.fixture
def sample_paragraph():
    return SAMPLE_PARAGRAPH
