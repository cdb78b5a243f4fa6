"""Map measured geometry back onto document blocks."""

import math
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from mailcanvas.blocks.models import EmailBlock
from mailcanvas.common.utils.config import get_config
from mailcanvas.common.utils.logger import get_logger
from mailcanvas.layout.models import BlockRegion, Measurement

logger = get_logger(__name__)


def _coerce(raw: Any) -> Measurement | None:
    """Accept a Measurement, a (x0, y0, x1, y1) bbox or a rect dict; None if unusable."""
    try:
        match raw:
            case Measurement():
                m = raw
            case tuple() | list() if len(raw) == 4:
                m = Measurement.from_bbox((float(raw[0]), float(raw[1]), float(raw[2]), float(raw[3])))
            case dict():
                m = Measurement.model_validate(raw)
            case _:
                return None
    except (ValidationError, ValueError, TypeError):
        return None

    values = (m.x, m.y, m.width, m.height)
    if not all(math.isfinite(v) for v in values) or m.width < 0 or m.height < 0:
        return None
    return m


def reconcile(
    blocks: Iterable[EmailBlock],
    measurements: Mapping[str, Any],
    offset: tuple[float, float] = (0.0, 0.0),
    scroll_top: float = 0.0,
) -> list[BlockRegion]:
    """One region per measured block, in document order.

    Blocks the host did not measure (hidden, not rendered, unknown kind) get no
    region. Heights are floored at ``min_region_height``; regions whose final
    height is below ``compact_height_threshold`` are flagged compact.

    Args:
        blocks: The document's blocks (or the document itself) in order.
        measurements: Host geometry keyed by block id.
        offset: Position of the rendered view inside the editor surface.
        scroll_top: Vertical scroll of the rendered view.

    Returns:
        list[BlockRegion]: Regions in document order.
    """
    cfg = get_config()
    ox, oy = offset
    regions: list[BlockRegion] = []
    seen: set[str] = set()

    for block in blocks:
        if block.id in seen:
            continue
        seen.add(block.id)

        measurement = _coerce(measurements.get(block.id))
        if measurement is None:
            if block.id in measurements:
                logger.debug("Ignoring unusable measurement for block %s", block.id)
            continue

        height = max(measurement.height, cfg.min_region_height)
        regions.append(
            BlockRegion(
                block_id=block.id,
                x=measurement.x + ox,
                y=measurement.y + oy - scroll_top,
                width=measurement.width,
                height=height,
                compact=height < cfg.compact_height_threshold,
            )
        )

    return regions
