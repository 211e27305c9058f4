"""Create a starter source tree from the bundled example project."""

from __future__ import annotations

import logging
import typing as typ

from docgen._constants import EXAMPLE_DIR
from docgen.writer import copy_tree

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def scaffold(output_dir: Path) -> Path:
    """Copy the example source files into ``output_dir`` and return it.

    Raises
    ------
    AssetCopyError
        If the example tree cannot be copied.
    """
    logger.info("Creating scaffold template directory")
    copy_tree(EXAMPLE_DIR, output_dir)
    return output_dir


__all__ = ["scaffold"]
