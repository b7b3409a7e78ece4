"""Shared fixtures for bookpath tests.

``SAMPLE_BOOK`` describes a small book with a title page bound as the front
page, a Roman-numbered preface, a two-level part, a draft, an auto-generated
login page and an appendix::

    1  Title page            (front page, excluded)
    2  Preface               roman
       3  Foreword
       4  Acknowledgements
    5  Part One
       6  Chapter 1
          7  Section A
          8  Section B       3 comments
       9  Chapter 2
    10 Draft                 draft
    11 Login                 login shortcode
    12 Appendix              1 comment
"""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from bookpath.config import load_book
from bookpath.store import Book

SAMPLE_BOOK = dedent(
    """
    settings:
      title_page: 1
      page_on_front: 1
    units:
      - {id: 1, title: Title page, order: 0}
      - {id: 2, title: Preface, order: 1, number_format: roman}
      - {id: 3, title: Foreword, parent: 2, order: 1}
      - {id: 4, title: Acknowledgements, parent: 2, order: 2}
      - {id: 5, title: Part One, order: 2}
      - {id: 6, title: Chapter 1, parent: 5, order: 1}
      - {id: 7, title: Section A, parent: 6, order: 1}
      - {id: 8, title: Section B, parent: 6, order: 2, comments: 3}
      - {id: 9, title: Chapter 2, parent: 5, order: 2}
      - {id: 10, title: Draft, order: 3, status: draft}
      - {id: 11, title: Login, order: 4, slug: login, content: "[theme-my-login]"}
      - {id: 12, title: Appendix, order: 5, comments: 1}
    posts:
      - {id: p1, title: Launch, date: 2024-01-05}
      - {id: p2, title: Update, date: 2024-02-10, comments: 2}
      - {id: p3, title: Wrap-up, date: 2024-03-15}
    """
).lstrip()


@pytest.fixture
def book_path(tmp_path: Path) -> Path:
    """Write ``SAMPLE_BOOK`` to a temporary ``book.yaml`` and return its path."""
    path = tmp_path / "book.yaml"
    path.write_text(SAMPLE_BOOK, encoding="utf-8")
    return path


@pytest.fixture
def sample_book(book_path: Path) -> Book:
    """Return the parsed ``SAMPLE_BOOK``."""
    return load_book(book_path)
