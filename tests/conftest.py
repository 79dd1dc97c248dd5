"""Shared test fixtures for the htmltoc test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """cli.main points structlog at the captured stderr; undo that per test."""
    yield
    structlog.reset_defaults()


@pytest.fixture()
def example_lines() -> list[str]:
    """Small document with a title, a TOC placeholder and two sections."""
    return [
        "<h1>Vulkan notes</h1>",
        "<h2>Table of contents</h2>",
        "<h2>Setup</h2>",
        "<h3>Install SDK</h3>",
    ]


@pytest.fixture()
def example_output() -> list[str]:
    return [
        "<h1 id='vulkan-notes'>Vulkan notes</h1>",
        "<h2 id='table-of-contents'>Table of contents</h2>",
        "<ul>",
        "<li><a href='#setup'>Setup</a></li>",
        "<ul>",
        "<li><a href='#install-sdk'>Install SDK</a></li>",
        "</ul>",
        "</ul>",
        "<h2 id='setup'>Setup</h2>",
        "<h3 id='install-sdk'>Install SDK</h3>",
    ]
