"""Protocol for the external compositing collaborator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from rpsprites.core.compositing.models import CompositeJob

if TYPE_CHECKING:
    from rpsprites.core.generator import GenerationReport


class CompositingError(RuntimeError):
    """A compositing invocation failed.

    Covers missing source files, malformed arguments, a missing binary and
    any other failure reported by the external tool.
    """

    def __init__(
        self,
        message: str,
        *,
        output: str | None = None,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.output = output
        self.returncode = returncode
        self.stderr = stderr
        # partial GenerationReport, attached when a run aborts on this error
        self.report: GenerationReport | None = None


@runtime_checkable
class Compositor(Protocol):
    """Protocol for anything that can render a CompositeJob to disk."""

    def composite(self, job: CompositeJob) -> None:
        """Render the job, writing (or overwriting) ``job.output``.

        Raises:
            CompositingError: If the output could not be produced
        """
        ...
