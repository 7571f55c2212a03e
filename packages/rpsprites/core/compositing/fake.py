"""In-memory compositor for tests and dry runs."""

from __future__ import annotations

from collections.abc import Callable

from rpsprites.core.compositing.models import CompositeJob
from rpsprites.core.compositing.protocols import CompositingError


class RecordingCompositor:
    """Records every job instead of rendering it.

    Args:
        fail_on: Optional predicate; jobs it matches raise CompositingError
            after being recorded.
    """

    def __init__(self, fail_on: Callable[[CompositeJob], bool] | None = None) -> None:
        self.jobs: list[CompositeJob] = []
        self._fail_on = fail_on

    def composite(self, job: CompositeJob) -> None:
        self.jobs.append(job)
        if self._fail_on is not None and self._fail_on(job):
            raise CompositingError(
                f"Simulated failure for {job.output}",
                output=str(job.output),
                returncode=1,
                stderr="simulated",
            )

    @property
    def outputs(self) -> list[str]:
        """Output file names in the order they were requested."""
        return [job.output.name for job in self.jobs]
