from functools import lru_cache

from typing_exam.core.config import get_settings
from typing_exam.services.backend import ExamBackend


def get_settings_dep():
    return get_settings()


@lru_cache
def get_backend() -> ExamBackend:
    """
    Fournit le backend (stores en mémoire) en dépendance (DI).
    Un seul par process ; les tests surchargent cette dépendance.
    """
    return ExamBackend(get_settings())
