"""Small exercises: arithmetic, counters, a worker pool and a timed booking."""

from __future__ import annotations

import queue
import sys
import threading
import time
from collections.abc import Iterable, Sequence
from typing import TextIO

FULL_MESSAGE = "Hotel is full"
RESERVED_MESSAGE = "Room reserved with sucess"


class TotalTooLarge(ValueError):
    """A sum went above the allowed limit."""

    def __init__(self) -> None:
        super().__init__("Total maior que 10")


def soma(a: int, b: int) -> int:
    return a + b


def soma_limitada(x: int, y: int) -> int:
    """Return ``x + y``, refusing totals greater than 10."""
    if x + y > 10:
        raise TotalTooLarge()
    return x + y


def contador(tipo: str, count: int = 10, delay: float = 0.5,
             out: TextIO | None = None) -> None:
    """Write ``count`` numbered lines labelled ``tipo``, pausing between them."""
    for i in range(count):
        (out or sys.stdout).write(f"{tipo}: {i}\n")
        time.sleep(delay)


def distribute_work(worker_ids: Sequence[str] = ("João", "Will", "Pedrin"),
                    values: Iterable[int] = range(1, 20), delay: float = 1.0,
                    out: TextIO | None = None) -> dict[str, list[int]]:
    """Hand ``values`` one at a time to a pool of workers; return what each received."""
    stream = out or sys.stdout
    channel: queue.Queue = queue.Queue(maxsize=1)
    received: dict[str, list[int]] = {worker: [] for worker in worker_ids}
    lock = threading.Lock()

    def work(worker_id: str) -> None:
        while (value := channel.get()) is not None:
            with lock:
                stream.write(f"Worker {worker_id} recebeu {value}\n")
                received[worker_id].append(value)
            time.sleep(delay)

    threads = [threading.Thread(target=work, args=(w,), daemon=True) for w in worker_ids]
    for thread in threads:
        thread.start()
    for value in values:
        channel.put(value)
    for thread in threads:
        channel.put(None)
    for thread in threads:
        thread.join()
    return received


def book_hotel(timeout: float = 4.0, booking_time: float = 5.0) -> str:
    """Try to book a room taking ``booking_time`` seconds before ``timeout`` expires."""
    if timeout <= booking_time:
        time.sleep(max(timeout, 0.0))
        return FULL_MESSAGE
    time.sleep(booking_time)
    return RESERVED_MESSAGE