"""Console report of image dimensions."""
from __future__ import annotations

from .utils.buffer import Artifact

DIVIDER = "-" * 40

_LABEL_WIDTH = 12


def format_artifact(artifact: Artifact) -> str:
    """Four ``key : value`` lines describing ``artifact``."""
    buf = artifact.buffer
    lines = [
        f"{'Image Path':<{_LABEL_WIDTH}} : {artifact.path}",
        f"{'Width':<{_LABEL_WIDTH}} : {buf.width:3d}",
        f"{'Height':<{_LABEL_WIDTH}} : {buf.height:3d}",
        f"{'Channel':<{_LABEL_WIDTH}} : {buf.channels:3d}",
    ]
    return "\n".join(lines)


def format_report(source: Artifact, derived: list[Artifact]) -> str:
    """Source block, divider, then one block per derived artifact."""
    parts = [format_artifact(source), DIVIDER]
    parts.extend(format_artifact(a) for a in derived)
    return "\n".join(parts)


__all__ = ["DIVIDER", "format_artifact", "format_report"]
