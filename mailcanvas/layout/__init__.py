"""Layout reconciliation: which screen region each block occupies."""

from mailcanvas.layout.core import reconcile
from mailcanvas.layout.measure import measure_blocks, regions_for
from mailcanvas.layout.models import BlockRegion, Measurement

__all__ = ["BlockRegion", "Measurement", "measure_blocks", "reconcile", "regions_for"]
