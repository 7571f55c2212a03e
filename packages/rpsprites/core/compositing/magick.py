"""ImageMagick compositor.

Renders CompositeJobs by invoking the ``magick`` binary once per output.
"""

from __future__ import annotations

import logging
import shlex
import subprocess

from rpsprites.core.compositing.models import CompositeJob
from rpsprites.core.compositing.protocols import CompositingError

logger = logging.getLogger(__name__)


class MagickCompositor:
    """Compositor backed by the ImageMagick 7 command-line tool.

    Notes:
        Requires ImageMagick 7 (``magick``) on PATH:
        - macOS: brew install imagemagick
        - Ubuntu: apt-get install imagemagick (use binary="convert" for IM6)
    """

    def __init__(self, binary: str = "magick", timeout_s: float | None = None) -> None:
        self.binary = binary
        self.timeout_s = timeout_s

    def build_command(self, job: CompositeJob) -> list[str]:
        """Build the argv for one job.

        The canvas is created first, then each layer is composited in order:

            magick -size 128x128 -depth 8 xc:none \\
                base.png -composite \\
                badge.png -geometry 48x48+8+72 -composite \\
                out.png

        Args:
            job: Job to render

        Returns:
            Argument vector (no shell quoting applied)
        """
        canvas = job.canvas
        argv = [
            self.binary,
            "-size",
            canvas.size,
            "-depth",
            str(canvas.depth),
            f"xc:{canvas.background}",
        ]
        for layer in job.layers:
            argv.append(str(layer.source))
            if layer.geometry is not None:
                argv.extend(["-geometry", str(layer.geometry)])
            argv.append("-composite")
        argv.append(str(job.output))
        return argv

    def format_command(self, job: CompositeJob) -> str:
        """Shell-quoted command line for display."""
        return shlex.join(self.build_command(job))

    def composite(self, job: CompositeJob) -> None:
        """Run ImageMagick for one job.

        Args:
            job: Job to render

        Raises:
            CompositingError: If the output directory cannot be created, or the binary
                is missing, not executable, times out or exits non-zero
        """
        argv = self.build_command(job)
        output = str(job.output)
        try:
            job.output.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CompositingError(
                f"Cannot create output directory {job.output.parent}: {e}",
                output=output,
            ) from e

        logger.debug(f"Running: {shlex.join(argv)}")

        try:
            result = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                timeout=self.timeout_s,
                check=False,  # returncode checked below
            )
        except FileNotFoundError as e:
            raise CompositingError(
                f"{self.binary} binary not found. Install ImageMagick: "
                "brew install imagemagick (macOS) or "
                "apt-get install imagemagick (Ubuntu)",
                output=output,
            ) from e
        except subprocess.TimeoutExpired as e:
            raise CompositingError(
                f"{self.binary} timeout after {self.timeout_s}s for {output}",
                output=output,
            ) from e
        except OSError as e:
            raise CompositingError(
                f"Cannot run {self.binary} for {output}: {e}",
                output=output,
            ) from e

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise CompositingError(
                f"{self.binary} failed with exit code {result.returncode} for {output}: {stderr}",
                output=output,
                returncode=result.returncode,
                stderr=stderr,
            )
