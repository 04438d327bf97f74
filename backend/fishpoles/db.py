from datetime import datetime, timezone
from typing import Iterator
from uuid import uuid4

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase, Session


class Base(DeclarativeBase):
    pass


def new_id() -> str:
    return str(uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def import_all_models() -> None:
    # Import explícito dos models para registrar no SQLAlchemy metadata
    # (sem isso, create_all() cria 0 tabelas)
    import fishpoles.models.holding_account  # noqa: F401
    import fishpoles.models.company  # noqa: F401
    import fishpoles.models.profit_center  # noqa: F401
    import fishpoles.models.transaction  # noqa: F401
    import fishpoles.models.note  # noqa: F401
    import fishpoles.models.overhead  # noqa: F401
    import fishpoles.models.connection  # noqa: F401
    import fishpoles.models.kanban  # noqa: F401
    import fishpoles.models.rock  # noqa: F401
    import fishpoles.models.team  # noqa: F401


class Database:
    """Engine + sessionmaker com ciclo de vida explícito.

    Criado uma vez pelo create_app e descartado no shutdown (lifespan).
    Nada de engine global no módulo.
    """

    def __init__(self, url: str, *, echo: bool = False):
        self.url = url
        is_sqlite = url.startswith("sqlite")
        self.engine: Engine = create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False} if is_sqlite else {},
        )
        self.SessionLocal = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)

    def create_all(self) -> None:
        import_all_models()
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()


def session_scope(database: Database) -> Iterator[Session]:
    db = database.session()
    try:
        yield db
    finally:
        db.close()
