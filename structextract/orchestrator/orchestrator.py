"""Concurrent batch processing of uploaded documents."""

import asyncio
import itertools
from collections.abc import AsyncIterator, Callable, Sequence
from contextlib import asynccontextmanager
from dataclasses import replace
from uuid import uuid4

from structextract.encoding.encoder import FileEncoder
from structextract.encoding.exceptions import EncodingFailure
from structextract.encoding.models import SourceFile
from structextract.extraction.base import BaseExtractor
from structextract.extraction.exceptions import ExtractionError
from structextract.extraction.models import ExtractionRecord
from structextract.logging.logger import Log
from structextract.orchestrator.models import BatchSummary, FileEntry, FileStatus
from structextract.orchestrator.transitions import apply_transition

Listener = Callable[[tuple[FileEntry, ...]], None]

GENERIC_FAILURE_MESSAGE = "Processing failed"


class BatchOrchestrator:
    """Tracks submitted files and drives encode -> extract for each one.

    Every submitted file gets its own pipeline; all pipelines of a submission
    start together and the submission counts as in flight until each of them
    reaches SUCCESS or ERROR. Entries are stored as an immutable tuple that is
    replaced wholesale by ``apply_transition`` on every change.
    """

    def __init__(
        self,
        encoder: FileEncoder,
        extractor: BaseExtractor,
        max_concurrency: int = 0,
    ) -> None:
        self._encoder = encoder
        self._extractor = extractor
        self._semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency > 0 else None
        self._entries: tuple[FileEntry, ...] = ()
        self._active_batches: set[int] = set()
        self._batch_ids = itertools.count(1)
        self._tasks: set[asyncio.Task[None]] = set()
        self._listeners: list[Listener] = []

    @property
    def entries(self) -> tuple[FileEntry, ...]:
        return self._entries

    @property
    def is_processing(self) -> bool:
        """True while any submission made since the last clear is unresolved."""
        return bool(self._active_batches)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with the entries snapshot after every change.

        Returns a function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def submit(self, files: Sequence[SourceFile]) -> "asyncio.Task[None]":
        """Track ``files`` as PENDING entries and start processing them.

        Entries are appended synchronously in submission order; the returned
        task resolves once every pipeline of this submission has finished.
        Must be called while an event loop is running.
        """
        loop = asyncio.get_running_loop()
        new_entries = tuple(FileEntry(id=uuid4().hex, file_name=f.name) for f in files)
        if not new_entries:
            return loop.create_task(self._run_batch(0, []))

        self._entries = self._entries + new_entries
        batch_id = next(self._batch_ids)
        self._active_batches.add(batch_id)
        Log.info(f"Batch {batch_id}: submitted {len(new_entries)} files")
        self._notify()

        jobs = [(entry.id, source) for entry, source in zip(new_entries, files)]
        task = loop.create_task(self._run_batch(batch_id, jobs))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def run(self, files: Sequence[SourceFile]) -> list[ExtractionRecord]:
        """Submit ``files``, wait for all of them, and return the consolidated view."""
        await self.submit(files)
        return self.consolidated()

    async def process(self, entry_id: str, source: SourceFile) -> None:
        """Run one file's pipeline. Never raises for per-file failures."""
        async with self._slot():
            if not self._apply(entry_id, FileStatus.PROCESSING):
                Log.debug(f"Skipping {source.name}: entry {entry_id} is no longer tracked")
                return
            Log.info(f"Processing {source.name}")
            try:
                document = await self._encoder.encode_async(source)
                records = await self._extractor.extract(document)
            except (EncodingFailure, ExtractionError) as exc:
                Log.error(f"Failed to process {source.name}: {exc}")
                self._apply(
                    entry_id,
                    FileStatus.ERROR,
                    error_message=str(exc) or GENERIC_FAILURE_MESSAGE,
                )
            except Exception as exc:
                Log.exception(f"Unexpected error while processing {source.name}")
                self._apply(
                    entry_id,
                    FileStatus.ERROR,
                    error_message=str(exc) or GENERIC_FAILURE_MESSAGE,
                )
            else:
                self._apply(entry_id, FileStatus.SUCCESS, records=records)
                Log.info(f"Processed {source.name}: {len(records)} records")

    def clear_all(self) -> None:
        """Drop every entry and reset the in-flight flag.

        Pipelines already dispatched keep running; their results are discarded
        because their entry ids are gone.
        """
        self._entries = ()
        self._active_batches.clear()
        Log.info("Cleared all entries")
        self._notify()

    def consolidated(self) -> list[ExtractionRecord]:
        """Records of every SUCCESS entry, in submission order, tagged by file."""
        return [
            replace(record, source_file_name=entry.file_name)
            for entry in self._entries
            if entry.status is FileStatus.SUCCESS
            for record in entry.records
        ]

    def summary(self) -> BatchSummary:
        counts = {status: 0 for status in FileStatus}
        for entry in self._entries:
            counts[entry.status] += 1
        return BatchSummary(
            total=len(self._entries),
            pending=counts[FileStatus.PENDING],
            processing=counts[FileStatus.PROCESSING],
            succeeded=counts[FileStatus.SUCCESS],
            failed=counts[FileStatus.ERROR],
            records=sum(len(e.records) for e in self._entries),
        )

    async def _run_batch(self, batch_id: int, jobs: list[tuple[str, SourceFile]]) -> None:
        if not jobs:
            return
        try:
            results = await asyncio.gather(
                *(self.process(entry_id, source) for entry_id, source in jobs),
                return_exceptions=True,
            )
            for (_entry_id, source), result in zip(jobs, results):
                if isinstance(result, BaseException):
                    Log.error(f"Pipeline for {source.name} ended abnormally: {result!r}")
        finally:
            self._active_batches.discard(batch_id)
            Log.info(f"Batch {batch_id}: all {len(jobs)} pipelines finished")
            self._notify()

    def _apply(self, entry_id: str, status: FileStatus, **changes: object) -> bool:
        updated = apply_transition(self._entries, entry_id, status, **changes)  # type: ignore[arg-type]
        if updated is self._entries:
            Log.debug(f"Discarded {status.value} for untracked entry {entry_id}")
            return False
        self._entries = updated
        self._notify()
        return True

    @asynccontextmanager
    async def _slot(self) -> AsyncIterator[None]:
        if self._semaphore is None:
            yield
            return
        async with self._semaphore:
            yield

    def _notify(self) -> None:
        snapshot = self._entries
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                Log.exception("Entry listener failed")
