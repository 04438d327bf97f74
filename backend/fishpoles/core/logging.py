import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configura o root logger uma vez e ajusta o nível do pacote.

    Chamado pelo create_app; se o servidor (uvicorn) já configurou handlers,
    basicConfig não faz nada e só o nível do logger "fishpoles" muda.
    """
    lvl = logging.getLevelName((level or "INFO").upper())
    if not isinstance(lvl, int):
        lvl = logging.INFO

    logging.basicConfig(level=lvl, format=LOG_FORMAT)
    logging.getLogger("fishpoles").setLevel(lvl)
