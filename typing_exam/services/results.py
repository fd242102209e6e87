import logging
import threading
import time
from typing import Callable, Dict, List

from typing_exam.models.results import TestResult

logger = logging.getLogger(__name__)


class ResultLedger:
    """
    Journal append-only des résultats soumis (pas de update / delete).
    Le timestamp est attribué à la soumission et strictement croissant,
    donc le listing par timestamp suit l'ordre des soumissions.
    """

    def __init__(self, clock: Callable[[], int] = time.time_ns) -> None:
        self._clock = clock
        self._results: Dict[str, TestResult] = {}
        self._last_ts = 0
        self._lock = threading.Lock()

    def submit(
        self,
        user_name: str,
        user_mobile: str,
        passage_title: str,
        wpm: int,
        accuracy: int,
        mistakes: int,
    ) -> str:
        with self._lock:
            ts = max(self._clock(), self._last_ts + 1)
            self._last_ts = ts
            result_id = f"{user_mobile}-{ts}"

            self._results[result_id] = TestResult(
                id=result_id,
                user_name=user_name,
                user_mobile=user_mobile,
                passage_title=passage_title,
                wpm=wpm,
                accuracy=accuracy,
                mistakes=mistakes,
                timestamp=ts,
            )

        logger.info("Result submitted: %s (wpm=%s, accuracy=%s)", result_id, wpm, accuracy)
        return result_id

    def list(self) -> List[TestResult]:
        with self._lock:
            items = list(self._results.values())
        return [r.model_copy() for r in sorted(items, key=lambda r: r.timestamp)]

    def __len__(self) -> int:
        return len(self._results)
