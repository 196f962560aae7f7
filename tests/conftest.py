"""Shared fixtures for sorting tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from sortable_models import USER_SORTABLE, Base, OrganizationRecord, PostRecord, UserRecord


class RecordingLogger:
    """Collects warning strings like a ``logging.Logger`` would receive them."""

    def __init__(self) -> None:
        self.warnings: list[str] = []

    def warning(self, msg: str) -> None:
        self.warnings.append(msg)


class BrokenLogger:
    def warning(self, msg: str) -> None:
        raise RuntimeError("log sink is down")


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def broken_logger() -> BrokenLogger:
    return BrokenLogger()


@pytest.fixture
def restore_user_sortable() -> Iterator[None]:
    """Undo ``column_sortable_by`` calls made on UserRecord by a test."""
    yield
    UserRecord.__sortable__ = USER_SORTABLE


@pytest.fixture
def session() -> Iterator[Session]:
    """In-memory SQLite database with a handful of users and their posts."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as s:
        acme = OrganizationRecord(id=1, name="Acme", code="A")
        zeta = OrganizationRecord(id=2, name="Zeta", code="Z")
        s.add_all([acme, zeta])
        s.add_all(
            [
                UserRecord(
                    id=1, name="carol", first_name="Carol", last_name="Young",
                    email="c@example.com", organization=zeta,
                ),
                UserRecord(
                    id=2, name="alice", first_name="Alice", last_name="Smith",
                    email="a@example.com", organization=acme,
                ),
                UserRecord(
                    id=3, name="bob", first_name="Bob", last_name="Adams",
                    email="b@example.com", organization=None,
                ),
            ]
        )
        s.add_all(
            [
                PostRecord(id=1, title="b-post", author_id=2),
                PostRecord(id=2, title="d-post", author_id=2),
                PostRecord(id=3, title="a-post", author_id=1),
            ]
        )
        s.commit()
        yield s
    engine.dispose()
