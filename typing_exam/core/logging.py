import logging

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure le logger racine une seule fois (appelé par create_app).
    Les modules utilisent ensuite logging.getLogger(__name__).
    """
    root = logging.getLogger()
    lvl = getattr(logging, (level or "INFO").upper(), logging.INFO)

    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    root.setLevel(lvl)
    # uvicorn garde ses propres handlers, on aligne juste le niveau
    logging.getLogger("uvicorn").setLevel(lvl)
