"""External image compositing seam.

All pixel work is delegated to an external tool behind the Compositor
protocol.

Example:
    >>> from rpsprites.core.compositing import MagickCompositor
    >>> compositor = MagickCompositor()
    >>> compositor.composite(job)  # writes job.output
"""

from rpsprites.core.compositing.fake import RecordingCompositor
from rpsprites.core.compositing.magick import MagickCompositor
from rpsprites.core.compositing.models import Canvas, CompositeJob, Geometry, Layer
from rpsprites.core.compositing.protocols import CompositingError, Compositor

__all__ = [
    # Models
    "Canvas",
    "CompositeJob",
    "Geometry",
    "Layer",
    # Protocol
    "Compositor",
    "CompositingError",
    # Implementations
    "MagickCompositor",
    "RecordingCompositor",
]
