from __future__ import annotations

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from collections.abc import Iterator  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import create_engine, func, select  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from phonecheck.db.store import NumberStore  # noqa: E402
from phonecheck.models import Base  # noqa: E402
from phonecheck.schemas.results import ReportedBatch  # noqa: E402


@pytest.fixture
def engine() -> Iterator[Engine]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session(session_factory: sessionmaker) -> Iterator[Session]:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def store(db_session: Session) -> NumberStore:
    return NumberStore(db_session)


@pytest.fixture
def override_get_db(session_factory: sessionmaker):
    def _override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    return _override_get_db


def count_rows(session: Session, model) -> int:
    return session.scalar(select(func.count()).select_from(model))


class FakeValidatorClient:
    """ValidatorClient 대역. 호출된 번호 목록을 기록한다."""

    def __init__(self, result: ReportedBatch | None = None) -> None:
        self.result = result
        self.calls: list[list[str]] = []

    def validate(self, numbers: list[str]) -> ReportedBatch | None:
        self.calls.append(list(numbers))
        return self.result


@pytest.fixture
def make_validator():
    return FakeValidatorClient


@pytest.fixture
def row_count(db_session: Session):
    def _count(model) -> int:
        db_session.expire_all()
        return count_rows(db_session, model)

    return _count
