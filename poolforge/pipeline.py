"""Load one image, pool it three ways and write the results beside it.

Pipeline:
- Load the source image (Pillow -> PixelBuffer)
- Min, max and average pool over ``block_size`` tiles
- Name each result ``<stem>_min<ext>``, ``<stem>_max<ext>``, ``<stem>_avg<ext>``
- Write each result (format picked from the extension)
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .utils.buffer import Artifact
from .utils.loader import load_artifact, write_artifact
from .utils.paths import derive_path
from .utils.pooling import Reducer, block_pool

logger = logging.getLogger(__name__)

POOLING_VARIANTS = (
    ("_min", Reducer.MIN),
    ("_max", Reducer.MAX),
    ("_avg", Reducer.AVERAGE),
)


def derive_artifacts(source: Artifact, block_size: int) -> list[Artifact]:
    """Pool ``source`` once per variant, in min, max, avg order."""
    derived = []
    for suffix, reducer in POOLING_VARIANTS:
        buf = block_pool(source.buffer, block_size, reducer)
        derived.append(Artifact(derive_path(source.path, suffix), buf))
    return derived


def run(image_path: Union[str, Path], block_size: int) -> tuple[Artifact, list[Artifact]]:
    """Run the whole pipeline for one image.

    Returns the source artifact and the three derived artifacts. Derived
    artifacts with an unrecognised extension are not written.
    """
    source = load_artifact(image_path)
    logger.info(
        "loaded %s (%dx%d, %d channels)",
        source.path,
        source.buffer.width,
        source.buffer.height,
        source.buffer.channels,
    )

    derived = derive_artifacts(source, block_size)
    for artifact in derived:
        if write_artifact(artifact):
            logger.info("wrote %s", artifact.path)
        else:
            logger.warning("skipped %s (unsupported extension)", artifact.path)
    return source, derived


__all__ = ["POOLING_VARIANTS", "derive_artifacts", "run"]
