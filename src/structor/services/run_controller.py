from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import replace
from typing import Iterable

from structor.domain.errors import InvalidRunTransition, MissingInput, NamingServiceFailure
from structor.domain.models import InputFile, NameResult, RenameOutcome, RunState, RunStatus
from structor.ports.credential_port import CredentialPort
from structor.services.rename_engine import RenameEngine

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[RunState], None]


class RunController:
    """
    Drives the rename engine over an imported file list, one file at a time.

    State lives on the controller: the ordered files, the run state (status,
    counters, reserved names, failures) and the index -> name mapping. All
    mutations happen under one condition variable, which also carries the
    pause/resume/stop signals to the drive loop.
    """

    def __init__(
        self,
        engine: RenameEngine,
        credentials: CredentialPort,
        on_progress: ProgressCallback | None = None,
        yield_seconds: float = 0.0,
    ) -> None:
        self._engine = engine
        self._credentials = credentials
        self._on_progress = on_progress
        self._yield_seconds = yield_seconds
        self._cond = threading.Condition()
        self._files: list[InputFile] = []
        self._state = RunState()
        self._names: NameResult = {}
        self._generation = 0
        self._loop_active = False

    @property
    def files(self) -> list[InputFile]:
        with self._cond:
            return list(self._files)

    def snapshot(self) -> RunState:
        with self._cond:
            return self._snapshot_locked()

    def names(self) -> NameResult:
        with self._cond:
            return dict(self._names)

    def import_files(self, files: Iterable[InputFile]) -> None:
        """Replace the file list; indices restart at 0 and run state is cleared."""
        with self._cond:
            if self._loop_active or self._state.is_active:
                raise InvalidRunTransition("Cannot import files while a run is active")
            self._files = [
                InputFile(index=index, name=file.name, content=file.content)
                for index, file in enumerate(files)
            ]
            self._state = RunState(total=len(self._files))
            self._names = {}
            self._generation += 1
        logger.info("Imported %d files", len(self._files))

    def start(self) -> None:
        with self._cond:
            if self._loop_active or self._state.is_active:
                raise InvalidRunTransition(f"Cannot start from {self._state.status.value}")
            self._require_inputs()
            self._state = RunState(status=RunStatus.RUNNING, total=len(self._files))
            self._names = {}
            self._cond.notify_all()
        logger.info("Run started over %d files", len(self._files))

    def start_in_background(self) -> threading.Thread:
        self.start()
        thread = threading.Thread(target=self.run, name="structor-run", daemon=True)
        thread.start()
        return thread

    def run(self) -> RunState:
        """Process every file in index order until completion or stop()."""
        with self._cond:
            if self._loop_active:
                raise InvalidRunTransition("A run loop is already active")
            if self._state.status in (RunStatus.IDLE, RunStatus.COMPLETED):
                raise InvalidRunTransition("Call start() before run()")
            self._loop_active = True
            files = list(self._files)
            generation = self._generation
            api_key = self._credentials.api_key()
        try:
            for position, file in enumerate(files):
                if not self._wait_until_runnable():
                    break
                raw, error = self._engine.fetch_suggestion(file, api_key)
                with self._cond:
                    self._record(file, raw, error, generation)
                    self._state.processed_count += 1
                    snapshot = self._snapshot_locked()
                self._notify(snapshot)
                if position < len(files) - 1:
                    self._pause_between_files()
            with self._cond:
                self._cond.wait_for(lambda: self._state.status is not RunStatus.PAUSED)
                if self._state.status is RunStatus.RUNNING:
                    self._state.status = RunStatus.COMPLETED
                    logger.info(
                        "Run completed: %d files, %d naming failures",
                        self._state.processed_count,
                        len(self._state.failures),
                    )
                return self._snapshot_locked()
        finally:
            with self._cond:
                if self._state.is_active:
                    self._state.status = RunStatus.STOPPED
                self._loop_active = False
                self._cond.notify_all()

    def pause(self) -> None:
        with self._cond:
            if self._state.status is not RunStatus.RUNNING:
                raise InvalidRunTransition(f"Cannot pause from {self._state.status.value}")
            self._state.status = RunStatus.PAUSED
            self._cond.notify_all()
        logger.info("Run paused")

    def resume(self) -> None:
        with self._cond:
            if self._state.status is not RunStatus.PAUSED:
                raise InvalidRunTransition(f"Cannot resume from {self._state.status.value}")
            self._state.status = RunStatus.RUNNING
            self._cond.notify_all()
        logger.info("Run resumed")

    def toggle_pause(self) -> RunStatus:
        with self._cond:
            if self._state.status is RunStatus.RUNNING:
                self._state.status = RunStatus.PAUSED
            elif self._state.status is RunStatus.PAUSED:
                self._state.status = RunStatus.RUNNING
            self._cond.notify_all()
            return self._state.status

    def stop(self) -> None:
        with self._cond:
            if self._state.status is RunStatus.STOPPED:
                return
            if not self._state.is_active:
                raise InvalidRunTransition(f"Cannot stop from {self._state.status.value}")
            self._state.status = RunStatus.STOPPED
            processed = self._state.processed_count
            self._cond.notify_all()
        logger.info("Run stopped after %d files", processed)

    def regenerate(self, index: int) -> RenameOutcome:
        """
        Ask for a new name for one file.

        The previous name for the index stays reserved, so the new name can
        never collide with it or with any other assigned name.
        """
        with self._cond:
            if not 0 <= index < len(self._files):
                raise MissingInput(f"No file at index {index}")
            self._require_inputs()
            file = self._files[index]
            generation = self._generation
            api_key = self._credentials.api_key()
        raw, error = self._engine.fetch_suggestion(file, api_key)
        with self._cond:
            outcome = self._record(file, raw, error, generation)
        logger.info("Regenerated %s as %s", file.name, outcome.final_name)
        return outcome

    def _require_inputs(self) -> None:
        if not self._files:
            raise MissingInput("Import files first.")
        if not self._credentials.is_usable():
            raise MissingInput("Save a valid API key.")

    def _record(
        self,
        file: InputFile,
        raw: str,
        error: NamingServiceFailure | None,
        generation: int,
    ) -> RenameOutcome:
        if generation != self._generation:
            raise InvalidRunTransition("File list changed while a name was being fetched")
        final_name = self._engine.assign_name(raw, self._state.used_names)
        self._names[file.index] = final_name
        if error is None:
            self._state.failures.pop(file.index, None)
        else:
            self._state.failures[file.index] = str(error)
        return RenameOutcome(
            index=file.index, final_name=final_name, raw_suggestion=raw, error=error
        )

    def _wait_until_runnable(self) -> bool:
        with self._cond:
            self._cond.wait_for(lambda: self._state.status is not RunStatus.PAUSED)
            return self._state.status is RunStatus.RUNNING

    def _pause_between_files(self) -> None:
        if self._yield_seconds <= 0:
            return
        with self._cond:
            self._cond.wait(timeout=self._yield_seconds)

    def _notify(self, snapshot: RunState) -> None:
        if self._on_progress is not None:
            self._on_progress(snapshot)

    def _snapshot_locked(self) -> RunState:
        return replace(
            self._state,
            used_names=set(self._state.used_names),
            failures=dict(self._state.failures),
        )
