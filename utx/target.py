"""
Load targets.

A target is whatever a successful package load attaches to. The loader
only needs `finalize()`, called once after the structural parse succeeds.
"""

from typing import Dict, Optional, Protocol

from PIL import Image

from .errors import FinalizeError

ORIGIN_UPPER_LEFT = "upper_left"
ORIGIN_LOWER_LEFT = "lower_left"


class AssetTarget(Protocol):
    def finalize(self) -> None:
        ...


class ImageTarget:
    """Pillow image that a package load finalizes.

    Without an explicit image the target starts as a 1x1 RGBA image, the
    same as a freshly bound empty image.
    """

    def __init__(self, image: Optional[Image.Image] = None, origin: str = ORIGIN_UPPER_LEFT):
        if origin not in (ORIGIN_UPPER_LEFT, ORIGIN_LOWER_LEFT):
            raise ValueError(f"Unknown image origin: {origin}")
        self.image = image if image is not None else Image.new("RGBA", (1, 1))
        self.origin = origin
        self.finalized = False
        self.finalize_count = 0

    def attach_metadata(self, metadata: Dict):
        """Store package metadata alongside the image."""
        self.image.info.update(metadata)

    def finalize(self) -> None:
        """Normalize to RGBA with an upper-left origin."""
        try:
            image = self.image
            if image.mode != "RGBA":
                image = image.convert("RGBA")
            if self.origin == ORIGIN_LOWER_LEFT:
                image = image.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
                self.origin = ORIGIN_UPPER_LEFT
        except (OSError, ValueError) as e:
            raise FinalizeError(f"Could not normalize image: {e}") from e

        # Keep attached metadata across conversions
        image.info.update(self.image.info)
        self.image = image
        self.finalized = True
        self.finalize_count += 1
