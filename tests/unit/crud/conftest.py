"""Shared fixtures for crud unit tests"""

from datetime import datetime, timezone

import pytest

from docstore.crud.memory_repo import MemoryRepo
from docstore.crud.models import Author, Document


_T1 = datetime(2024, 1, 1, tzinfo=timezone.utc)
_T2 = datetime(2024, 2, 1, tzinfo=timezone.utc)
_T3 = datetime(2024, 3, 1, tzinfo=timezone.utc)


@pytest.fixture(name="alice")
def alice_fixture():
    return Author(id="a1", name="Alice")


@pytest.fixture(name="bob")
def bob_fixture():
    return Author(id="a2", name="Bob")


@pytest.fixture(name="repo")
def repo_fixture():
    """Empty store per test."""
    return MemoryRepo()


@pytest.fixture(name="seeded")
def seeded_fixture(repo, alice, bob):
    """Store holding Alpha-1 (alice, T1), Alpha-2 (bob, T2), Beta-1 (alice, T3)."""
    for title, content, author, created in [
        ("Alpha-1", "red apples", alice, _T1),
        ("Alpha-2", "green pears", bob, _T2),
        ("Beta-1", "red cherries", alice, _T3),
    ]:
        repo.save(Document(title=title, content=content, author=author, created=created))
    return repo


@pytest.fixture(name="stamps")
def stamps_fixture():
    """Creation times of the seeded documents, oldest first."""
    return _T1, _T2, _T3
