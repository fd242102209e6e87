import logging
import re
import threading
import time
from typing import Callable, Dict, List

from typing_exam.core.errors import NotFound
from typing_exam.models.passages import Passage

logger = logging.getLogger(__name__)

_SLUG_RE = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    slug = _SLUG_RE.sub("-", title.strip().lower()).strip("-")
    return slug or "passage"


class PassageRepository:
    """
    CRUD en mémoire des passages d'entraînement.
    id = "<slug du titre>-<instant de création en ns>", immuable.
    """

    def __init__(self, clock: Callable[[], int] = time.time_ns) -> None:
        self._clock = clock
        self._passages: Dict[str, Passage] = {}
        self._lock = threading.Lock()

    def add(self, title: str, content: str, time_minutes: int) -> str:
        with self._lock:
            now = self._clock()
            passage_id = f"{slugify(title)}-{now}"
            # même titre au même tick: on avance le tick
            while passage_id in self._passages:
                now += 1
                passage_id = f"{slugify(title)}-{now}"

            self._passages[passage_id] = Passage(
                id=passage_id,
                title=title,
                content=content,
                time_minutes=time_minutes,
            )

        logger.info("Passage added: %s", passage_id)
        return passage_id

    def update(self, passage_id: str, title: str, content: str, time_minutes: int) -> None:
        with self._lock:
            if passage_id not in self._passages:
                raise NotFound("Passage not found")
            self._passages[passage_id] = Passage(
                id=passage_id,
                title=title,
                content=content,
                time_minutes=time_minutes,
            )
        logger.info("Passage updated: %s", passage_id)

    def delete(self, passage_id: str) -> None:
        with self._lock:
            if self._passages.pop(passage_id, None) is None:
                raise NotFound("Passage not found")
        logger.info("Passage deleted: %s", passage_id)

    def get(self, passage_id: str) -> Passage:
        p = self._passages.get(passage_id)
        if p is None:
            raise NotFound("Passage not found")
        return p.model_copy()

    def list(self) -> List[Passage]:
        with self._lock:
            items = list(self._passages.values())
        return [p.model_copy() for p in sorted(items, key=lambda p: p.id)]

    def is_empty(self) -> bool:
        return not self._passages

    def __len__(self) -> int:
        return len(self._passages)
