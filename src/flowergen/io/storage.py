"""
On-disk store for generated flowers.

Images live at ``<root>/<seed>/<size>.png``. A flower is fully
determined by its seed and size, so an existing file is reused instead
of being rendered again.
"""

import logging
from pathlib import Path
from typing import Union

from flowergen.pipeline import generate_flower_image
from flowergen.seeds import parse_seed

logger = logging.getLogger(__name__)


def markdown_link(path: Union[str, Path]) -> str:
    """Markdown image reference for a stored flower."""
    return f"![Flower Image]({Path(path).as_posix()})\n"


class FlowerStore:
    """Folder of generated flower images keyed by seed and size."""

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def path_for(self, size: int, seed) -> Path:
        return self.root / str(parse_seed(seed)) / f"{size}.png"

    def exists(self, size: int, seed) -> bool:
        return self.path_for(size, seed).exists()

    def save(self, size: int, seed) -> Path:
        """
        Render and store the flower unless it is already on disk.

        Args:
            size: Image size in pixels.
            seed: Integer seed or numeric string.

        Returns:
            Path to the PNG file.
        """
        path = self.path_for(size, seed)
        if path.exists():
            logger.info("Flower image %s with seed:%s already exists", path.name, seed)
            return path

        png = generate_flower_image(size, seed)

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(png)
        logger.info("Flower image %s with seed:%s was saved", path.name, seed)
        return path
