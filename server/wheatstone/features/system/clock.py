"""
Метка времени для health-check.
"""

import threading
import time


class MonotonicMillis:
    """
    Время эпохи в миллисекундах, строго возрастающее между вызовами.

    Если два вызова попадают в одну миллисекунду (или системные часы
    отступили назад), возвращается предыдущее значение + 1.
    """

    def __init__(self, time_func=time.time):
        self._time_func = time_func
        self._last = 0
        self._lock = threading.Lock()

    def now(self) -> int:
        current = int(self._time_func() * 1000)
        with self._lock:
            if current <= self._last:
                current = self._last + 1
            self._last = current
            return current


# Общие часы процесса
clock = MonotonicMillis()
