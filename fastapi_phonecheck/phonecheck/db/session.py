from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from phonecheck.core.config import settings


def build_engine(url: str) -> Engine:
    parsed = make_url(url)
    # SQLite 는 풀 크기 옵션을 받지 않음 (로컬/테스트 용도)
    if parsed.get_backend_name() == "sqlite":
        if parsed.database in (None, "", ":memory:"):
            return create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        pool_pre_ping=True,               # 연결이 죽었는지 자동 체크
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )


# 엔진 생성
engine = build_engine(settings.database_url_resolved)

# 세션 팩토리
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def create_tables(bind: Engine | None = None) -> None:
    from phonecheck.models import Base

    Base.metadata.create_all(bind=bind or engine)


# 의존성 주입 함수
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
