"""Host measurement engine: lay markup out in headless Chromium and read block geometry."""

from contextlib import ExitStack, contextmanager
from typing import Any, Generator, TypedDict
import pathlib

from playwright.sync_api import Browser, Page, sync_playwright

from mailcanvas.blocks.models import EmailDocument
from mailcanvas.common.utils.config import get_config
from mailcanvas.common.utils.logger import get_logger
from mailcanvas.converter.render import render_email
from mailcanvas.layout.core import reconcile
from mailcanvas.layout.models import BlockRegion, Measurement

logger = get_logger(__name__)


class ElementData(TypedDict):
    id: str | None
    type: str | None
    bbox: dict[str, float]


PYTHON_FILE_DIR = pathlib.Path(__file__).parent.resolve()

INTERNAL_SCRIPT_CODE = (PYTHON_FILE_DIR / "measure.js").read_text()

IIFE_WRAPPER = "(() => {{\n{}\n}})()"


@contextmanager
def browser() -> Generator[Browser, Any, Any]:
    """Context manager for browser lifecycle."""
    playwright = sync_playwright().start()
    try:
        browser_instance = playwright.chromium.launch(headless=True)
        try:
            yield browser_instance
        finally:
            browser_instance.close()
    finally:
        playwright.stop()


@contextmanager
def rendered_page(markup: str, width: int, height: int) -> Generator[Page, Any, Any]:
    """Context manager for a page with `markup` loaded at the given viewport."""
    with ExitStack() as stack:
        browser_instance = stack.enter_context(browser())
        page = browser_instance.new_page(viewport={"width": width, "height": height})
        stack.callback(page.close)
        page.set_content(markup, wait_until="load", timeout=get_config().timeout_s * 1000)
        yield page


def _read_measurements(page: Page) -> dict[str, Measurement]:
    element_data: list[ElementData] = page.evaluate(
        IIFE_WRAPPER.format(f"{INTERNAL_SCRIPT_CODE}\n\nreturn measureBlocks();")
    )

    measurements: dict[str, Measurement] = {}
    for data in element_data:
        block_id = data.get("id")
        if not block_id or block_id in measurements:
            continue
        bbox = data["bbox"]
        measurements[block_id] = Measurement.from_bbox(
            (
                bbox["x"],
                bbox["y"],
                bbox["x"] + bbox["width"],
                bbox["y"] + bbox["height"],
            )
        )
    return measurements


def measure_blocks(markup: str, viewport_width: int | None = None) -> dict[str, Measurement]:
    """Geometry of every visible ``[data-block-id]`` element in `markup`."""
    width = viewport_width or get_config().viewport_width
    with rendered_page(markup, width, get_config().og_height) as page:
        measurements = _read_measurements(page)
    logger.debug("Measured %d blocks at width %d", len(measurements), width)
    return measurements


def regions_for(document: EmailDocument, viewport_width: int | None = None) -> list[BlockRegion]:
    """Render, measure and reconcile a document in one pass."""
    return reconcile(document, measure_blocks(render_email(document), viewport_width))
