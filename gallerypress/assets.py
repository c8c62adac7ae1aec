"""Static asset copying for Gallerypress.

The site ships a single stylesheet and the gallery tree (frames and configs).
Both are copied verbatim into the output directory, keeping their paths
relative to the project root.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from .utils import copy_tree


class AssetPipeline:
    """Copies static assets into the output directory.

    Attributes:
        project_root (Path): Root directory of the project.
        output_dir (Path): Directory where assets are written.
        stylesheet (Path): Stylesheet relative to project_root.
        asset_dirs (list[Path]): Directories copied recursively, relative to project_root.
    """

    def __init__(
        self,
        project_root: Path,
        output_dir: Path,
        stylesheet: Path,
        asset_dirs: list[Path],
    ):
        """Initialize the asset pipeline.

        Args:
            project_root: Root directory of the project.
            output_dir: Directory where built assets will be placed.
            stylesheet: Stylesheet path relative to project_root.
            asset_dirs: Directory paths relative to project_root.
        """
        self.project_root = project_root
        self.output_dir = output_dir
        self.stylesheet = stylesheet
        self.asset_dirs = list(asset_dirs)

    def run(self) -> None:
        """Copy the stylesheet and every asset directory.

        Raises:
            OSError: If any source is missing or a copy fails.
        """
        dest = self.output_dir / self.stylesheet
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(self.project_root / self.stylesheet, dest)
        for rel in self.asset_dirs:
            target = self.output_dir / rel
            copy_tree(self.project_root / rel, target)
