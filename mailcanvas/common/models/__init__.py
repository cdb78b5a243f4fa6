from mailcanvas.common.models.base import BBox, bbox_size

__all__ = ["BBox", "bbox_size"]
