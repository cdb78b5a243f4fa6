"""Quick CLI for rendering and inspecting stored email documents."""

import argparse
import json
from pathlib import Path

from mailcanvas.common.utils.logger import logger
from mailcanvas.common.utils.config import config


def _read(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


def main():
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(description="mailcanvas CLI")
    subparsers = parser.add_subparsers(dest="action", help="Action to perform")

    render_parser = subparsers.add_parser("render", help="Render a stored document to HTML")
    render_parser.add_argument("--input", required=True, type=str, help="JSON document or HTML file")
    render_parser.add_argument(
        "--format",
        type=str,
        choices=["blocks", "email", "page"],
        default="email",
        help="'blocks' for the block table, 'email' for sendable HTML, 'page' for the share page",
    )
    render_parser.add_argument("--author", type=str, default="Anonymous", help="Author line for --format page")
    render_parser.add_argument("--output", type=str, default="output.html", help="Where to write the HTML")

    regions_parser = subparsers.add_parser("regions", help="Measure block regions in headless Chromium")
    regions_parser.add_argument("--input", required=True, type=str, help="JSON document file")
    regions_parser.add_argument("--width", type=int, default=None, help="Viewport width in px")

    preview_parser = subparsers.add_parser("preview", help="Generate the social preview image")
    preview_parser.add_argument("--input", required=True, type=str, help="JSON document file")
    preview_parser.add_argument("--subject", type=str, default=None)
    preview_parser.add_argument("--author", type=str, default=None)
    preview_parser.add_argument("--output", type=str, default=None, help="Defaults to preview.png / preview.svg")

    subparsers.add_parser("config", help="Print configuration")

    args = parser.parse_args()

    action = args.action or "config"

    if action == "render":
        from mailcanvas.converter import parse, render, render_email, render_source, wrap_page

        raw = _read(args.input)
        document = parse(raw)
        if document is None:
            logger.warning("No readable document structure in %s, using it as markup", args.input)

        match str(args.format).lower():
            case "blocks":
                html = render(document) if document is not None else render_source(raw)
            case "email":
                html = render_email(document) if document is not None else render_source(raw)
            case "page":
                title = (document.subject if document is not None else None) or "Shared Email"
                html = wrap_page(render_source(raw), title, args.author)
            case _:
                logger.error(f"Unknown format: {args.format}")
                return

        Path(args.output).write_text(html, encoding="utf-8")
        logger.info("HTML written to %s", args.output)

    elif action == "regions":
        from mailcanvas.converter import parse
        from mailcanvas.layout import regions_for

        document = parse(_read(args.input))
        if document is None:
            logger.error("No readable document in %s", args.input)
            return

        logger.info("Measuring %d blocks...", len(document))
        for region in regions_for(document, args.width):
            print(region.model_dump_json())

    elif action == "preview":
        from mailcanvas.snapshot import SharedEmail, social_preview

        raw = _read(args.input)
        try:
            email_json = json.loads(raw)
        except json.JSONDecodeError:
            email_json = raw
        subject = args.subject
        if subject is None and isinstance(email_json, dict):
            subject = email_json.get("subject")

        preview = social_preview(
            SharedEmail(email_subject=subject, email_address=args.author, email_json=email_json)
        )
        output = args.output or ("preview.svg" if preview.is_fallback else "preview.png")
        Path(output).write_bytes(preview.content)
        logger.info("Preview (%s) written to %s", preview.media_type, output)

    elif action == "config":
        logger.info("Configuration:\n")
        for key, value in sorted(config.model_dump().items()):
            print(f"{key}={value}")


if __name__ == "__main__":
    main()
