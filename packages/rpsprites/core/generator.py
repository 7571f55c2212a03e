"""Asset generator - drives enumeration, recipe and compositor.

Every combination is rendered by exactly one compositor call, strictly one
at a time. By default the first failure aborts the run; outputs already
written stay on disk.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
import logging
from pathlib import Path

from rpsprites.core.catalog.enumeration import enumerate_combinations
from rpsprites.core.catalog.models import Combination
from rpsprites.core.compositing.protocols import CompositingError, Compositor
from rpsprites.core.config.models import AppConfig
from rpsprites.core.recipe import SpriteLayout, build_job

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FailedOutput:
    """An output whose compositing invocation failed."""

    name: str
    error: str
    returncode: int | None = None


@dataclass
class GenerationReport:
    """Outcome of one generation run."""

    planned: list[str] = field(default_factory=list)
    written: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[FailedOutput] = field(default_factory=list)
    pruned: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failed

    def to_dict(self) -> dict[str, object]:
        return {
            "success": self.success,
            "planned": len(self.planned),
            "written": self.written,
            "skipped": self.skipped,
            "failed": [
                {"name": f.name, "error": f.error, "returncode": f.returncode} for f in self.failed
            ],
            "pruned": self.pruned,
        }


class AssetGenerator:
    """Generates every composited sprite for a set of identities.

    Args:
        compositor: Renders each CompositeJob
        sources_dir: Directory holding ``<identity>.png`` sources
        output_dir: Directory outputs are written to
        layout: Canvas and badge geometry
        keep_going: Record failures and continue instead of aborting
        check_sources: Skip combinations whose sources are missing
        prune_stale: Delete outputs not in the planned set after a clean run
    """

    def __init__(
        self,
        compositor: Compositor,
        sources_dir: Path,
        output_dir: Path,
        layout: SpriteLayout | None = None,
        *,
        keep_going: bool = False,
        check_sources: bool = False,
        prune_stale: bool = False,
    ) -> None:
        self.compositor = compositor
        self.sources_dir = Path(sources_dir)
        self.output_dir = Path(output_dir)
        self.layout = layout or SpriteLayout()
        self.keep_going = keep_going
        self.check_sources = check_sources
        self.prune_stale = prune_stale

    @classmethod
    def from_config(cls, config: AppConfig, compositor: Compositor) -> AssetGenerator:
        return cls(
            compositor,
            sources_dir=config.paths.sources_dir,
            output_dir=config.paths.output_dir,
            layout=config.layout.to_layout(),
            keep_going=config.generation.keep_going,
            check_sources=config.generation.check_sources,
            prune_stale=config.generation.prune_stale,
        )

    def plan(self, elements: Sequence[str], augments: Sequence[str]) -> list[Combination]:
        """List every combination that a run would render, in render order."""
        return list(enumerate_combinations(elements, augments))

    def run(self, elements: Sequence[str], augments: Sequence[str]) -> GenerationReport:
        """Render every combination.

        Args:
            elements: Element identities
            augments: Augment identities

        Returns:
            GenerationReport for the run

        Raises:
            CompositingError: On the first failure, unless keep_going is set. The
                partial report (including that failure) is attached as ``report``.
        """
        combinations = self.plan(elements, augments)
        report = GenerationReport(planned=[c.filename for c in combinations])
        logger.info(
            f"Generating {len(combinations)} sprites from {len(elements)} elements "
            f"and {len(augments)} augments into {self.output_dir}"
        )

        for combination in combinations:
            job = build_job(combination, self.sources_dir, self.output_dir, self.layout)

            if self.check_sources:
                missing = [str(p) for p in job.sources if not p.is_file()]
                if missing:
                    logger.warning(f"Skipping {combination.name}: missing {', '.join(missing)}")
                    report.skipped.append(combination.filename)
                    continue

            try:
                self.compositor.composite(job)
            except CompositingError as e:
                logger.error(f"Failed to generate {combination.name}: {e}")
                report.failed.append(
                    FailedOutput(name=combination.filename, error=str(e), returncode=e.returncode)
                )
                if not self.keep_going:
                    e.report = report
                    raise
                continue

            logger.debug(f"Wrote {job.output}")
            report.written.append(combination.filename)

        if self.prune_stale:
            if report.success:
                report.pruned = self.prune(report.planned)
            else:
                logger.warning("Not pruning stale outputs: run had failures")

        logger.info(
            f"Generated {len(report.written)}/{len(combinations)} sprites "
            f"({len(report.skipped)} skipped, {len(report.failed)} failed)"
        )
        return report

    def find_stale(self, planned: Sequence[str]) -> list[Path]:
        """PNG files directly in the output directory that are not planned.

        Returns an empty list when the sources live in the output directory
        itself, so source images are never reported as stale.
        """
        if not self.output_dir.is_dir():
            return []
        if self.sources_dir.resolve() == self.output_dir.resolve():
            logger.warning("Sources and outputs share a directory; stale detection disabled")
            return []
        keep = set(planned)
        return sorted(
            p for p in self.output_dir.glob("*.png") if p.is_file() and p.name not in keep
        )

    def prune(self, planned: Sequence[str]) -> list[str]:
        """Delete stale outputs and return their names."""
        pruned = []
        for path in self.find_stale(planned):
            path.unlink()
            logger.info(f"Pruned stale output {path.name}")
            pruned.append(path.name)
        return pruned
