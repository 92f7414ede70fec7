"""Concurrent fan-out of file processing tasks."""

import logging
import queue
import threading
import time
from typing import Callable, Iterable, Optional

from .error_handler import ErrorHandler
from .models import FileRecord, MoveAction, ProcessingFailure, RunResult
from .processor import FileProcessor


_CLOSED = object()


class Organizer:
    """Runs the records through worker threads and streams their outcomes.

    Records wait in a pending queue drained by one thread per record, or by
    ``max_workers`` threads when capped. Every worker writes to a single
    unbounded outcome queue, so producers never block.
    A closer thread waits for all tasks and then marks the queue closed; the
    calling thread drains it until then, reporting failures as they arrive.
    """

    def __init__(self, processor: Optional[FileProcessor] = None, max_workers: Optional[int] = None):
        """
        Initialize the organizer.

        Args:
            processor: Processor used by every task
            max_workers: Cap on worker threads. None starts one thread per record.
        """
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be a positive integer")
        self.processor = processor or FileProcessor()
        self.max_workers = max_workers
        self.error_handler = ErrorHandler()
        self.logger = logging.getLogger(__name__)

    def run(
        self,
        records: Iterable[FileRecord],
        dry_run: bool = False,
        on_action: Optional[Callable[[MoveAction], None]] = None,
        on_failure: Optional[Callable[[ProcessingFailure], None]] = None,
    ) -> RunResult:
        """
        Process every record concurrently and wait for all of them.

        Individual failures never abort the run; each one is logged, passed to
        ``on_failure`` and collected in the result.

        Args:
            records: Scanned records to process
            dry_run: Only report intended moves
            on_action: Called from the calling thread for each successful move or preview
            on_failure: Called from the calling thread for each failed record

        Returns:
            RunResult accounting for every record exactly once
        """
        records = list(records)
        start_time = time.time()
        result = RunResult(total=len(records), dry_run=dry_run)
        outcomes: "queue.Queue" = queue.Queue()
        pending: "queue.Queue" = queue.Queue()
        for record in records:
            pending.put(record)

        worker_count = len(records) if self.max_workers is None else min(self.max_workers, len(records))
        workers = self._start_workers(worker_count, dry_run, pending, outcomes)

        def close_when_done():
            for worker in workers:
                worker.join()
            outcomes.put(_CLOSED)

        closer = threading.Thread(target=close_when_done, name="organize-closer", daemon=True)
        try:
            closer.start()
        except RuntimeError as e:
            self.logger.warning(f"Could not start closer thread, waiting inline: {e}")
            closer = None
            close_when_done()

        for outcome in iter(outcomes.get, _CLOSED):
            if isinstance(outcome, ProcessingFailure):
                self.logger.error(f"Error processing {outcome}")
                result.failures.append(outcome)
                self._notify(on_failure, outcome)
            elif isinstance(outcome, MoveAction):
                result.actions.append(outcome)
                self._notify(on_action, outcome)
            else:
                result.skipped_directories += 1

        if closer is not None:
            closer.join()
        result.duration = time.time() - start_time

        if result.failures:
            self.error_handler.log_error_summary(
                [failure.error for failure in result.failures], "file organization"
            )
        self.logger.info(
            f"Processed {result.total} entries in {result.duration:.3f}s: "
            f"{len(result.actions)} files, {result.skipped_directories} folders skipped, "
            f"{len(result.failures)} failed"
        )
        return result

    def _start_workers(self, count: int, dry_run: bool, pending: "queue.Queue", outcomes: "queue.Queue"):
        """
        Start up to ``count`` worker threads draining ``pending``.

        When the host refuses a new thread the workers already running take
        over the remaining records. If none could start, every record is
        reported as failed.
        """
        workers = []
        for index in range(count):
            worker = threading.Thread(
                target=self._work,
                args=(dry_run, pending, outcomes),
                name=f"organize-{index}",
                daemon=True,
            )
            try:
                worker.start()
            except RuntimeError as e:
                self.logger.warning(f"Started {len(workers)} of {count} workers: {e}")
                if not workers:
                    for record in self._drain(pending):
                        outcomes.put(ProcessingFailure(record.name, e))
                break
            workers.append(worker)
        return workers

    def _work(self, dry_run: bool, pending: "queue.Queue", outcomes: "queue.Queue") -> None:
        for record in self._drain(pending):
            try:
                outcomes.put(self.processor.process(record, dry_run))
            except Exception as e:
                outcomes.put(ProcessingFailure(record.name, e))

    @staticmethod
    def _drain(pending: "queue.Queue"):
        while True:
            try:
                yield pending.get_nowait()
            except queue.Empty:
                return

    def _notify(self, callback, outcome) -> None:
        if callback is None:
            return
        try:
            callback(outcome)
        except Exception:
            self.logger.exception(f"Outcome callback failed for {outcome}")
