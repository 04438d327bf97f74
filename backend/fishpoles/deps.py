from datetime import date
from typing import Iterator

from fastapi import Request
from sqlalchemy.orm import Session

from fishpoles.db import Database, session_scope


def get_database(request: Request) -> Database:
    return request.app.state.database


# dependency padrão FastAPI (sessão por request)
def get_db(request: Request) -> Iterator[Session]:
    yield from session_scope(get_database(request))


def get_today() -> date:
    """Data de referência do dashboard (calendário local, sem fuso).

    Testes sobrescrevem via app.dependency_overrides.
    """
    return date.today()
