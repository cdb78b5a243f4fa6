"""Geometry models for layout reconciliation."""

from pydantic import BaseModel

from mailcanvas.common.models import BBox, bbox_size


class Measurement(BaseModel):
    """Where the host engine measured a block, in view coordinates."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_bbox(cls, bbox: BBox) -> "Measurement":
        width, height = bbox_size(bbox)
        return cls(x=bbox[0], y=bbox[1], width=width, height=height)

    @property
    def bbox(self) -> BBox:
        return (self.x, self.y, self.x + self.width, self.y + self.height)


class BlockRegion(BaseModel):
    """Screen area a block occupies in the current render pass.

    Derived data: recomputed after every layout change, never stored with the document.
    """

    block_id: str
    x: float
    y: float
    width: float
    height: float
    compact: bool = False  # too small for full edit chrome, show the compact badge
