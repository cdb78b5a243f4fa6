"""Document -> HTML.

Every block becomes one ``<tr data-block-id=... data-block-type=...>`` row.
A row is built from its own block only, so rows can be re-rendered one at a
time and located again in the rendered view by id.
"""

from html import escape
from typing import Any

from mailcanvas.blocks.models import (
    BlockStyles,
    ButtonBlock,
    DividerBlock,
    EmailBlock,
    EmailDocument,
    FooterBlock,
    HeaderBlock,
    HeroBlock,
    ImageBlock,
    TextBlock,
    css_size,
)
from mailcanvas.common.utils.config import get_config

BASE_PADDING = "20px 40px"
LINK_COLOR = "#3B82F6"
MUTED_COLOR = "#666"

BUTTON_STYLES: dict[str, str] = {
    "primary": "background-color: #3B82F6; color: #ffffff; border: 2px solid #3B82F6",
    "secondary": "background-color: #6B7280; color: #ffffff; border: 2px solid #6B7280",
    "outline": "background-color: transparent; color: #3B82F6; border: 2px solid #3B82F6",
    "ghost": "background-color: transparent; color: #3B82F6; border: 2px solid transparent",
}


def _attr(value: Any) -> str:
    return escape(str(value), quote=True)


def _styles_css(styles: BlockStyles, force_align: str | None = None) -> str:
    """Inline CSS for a block's cell."""
    props: list[str] = []
    props.append(f"padding: {css_size('padding', styles.padding) if styles.padding else BASE_PADDING}")
    props.append(f"text-align: {force_align or styles.text_align or 'center'}")

    if styles.margin:
        props.append(f"margin: {css_size('margin', styles.margin)}")
    if styles.text_color:
        props.append(f"color: {styles.text_color}")
    if styles.background_color:
        props.append(f"background-color: {styles.background_color}")
    if styles.font_family:
        props.append(f"font-family: {styles.font_family}")
    if styles.font_weight:
        props.append(f"font-weight: {styles.font_weight}")
    if styles.font_size:
        props.append(f"font-size: {css_size('font_size', styles.font_size)}")
    if styles.line_height:
        props.append(f"line-height: {css_size('line_height', styles.line_height)}")
    if styles.border_width and styles.border_style and styles.border_color:
        props.append(
            f"border: {css_size('border_width', styles.border_width)} {styles.border_style} {styles.border_color}"
        )
    if styles.border_radius:
        props.append(f"border-radius: {css_size('border_radius', styles.border_radius)}")
    if styles.text_decoration:
        props.append(f"text-decoration: {styles.text_decoration}")

    return _attr("; ".join(props))


def _row(block: EmailBlock, inner: str, td_style: str | None = None) -> str:
    style = td_style if td_style is not None else _styles_css(block.styles)
    return (
        f'<tr data-block-id="{_attr(block.id)}" data-block-type="{_attr(block.block_type)}">\n'
        f'  <td style="{style}">{inner}</td>\n'
        f"</tr>"
    )


def _img(url: str, alt: str | None, width: int | None, height: int | None, style: str) -> str:
    size = ""
    if width:
        size += f' width="{int(width)}"'
    if height:
        size += f' height="{int(height)}"'
    return f'<img src="{_attr(url)}" alt="{_attr(alt or "")}"{size} style="{style}" />'


def _render_header(block: HeaderBlock) -> str:
    c = block.content
    if c.image_url:
        inner = _img(
            c.image_url,
            c.image_alt,
            c.image_width,
            c.image_height,
            "display: inline-block; max-width: 100%; height: auto;",
        )
    else:
        inner = (
            '<h1 style="margin: 0; font-size: 32px; font-weight: bold; line-height: 1.2;">'
            f"{escape(c.text or 'Company Name')}</h1>"
        )
    return _row(block, inner)


def _render_hero(block: HeroBlock) -> str:
    c = block.content
    inner = f'<h1 style="margin: 0; font-size: 48px; font-weight: bold; line-height: 1.2;">{escape(c.headline)}</h1>'
    if c.subheadline:
        inner += f'<p style="margin: 10px 0 0 0; font-size: 18px; line-height: 1.4;">{escape(c.subheadline)}</p>'
    return _row(block, inner)


def _render_text(block: TextBlock) -> str:
    c = block.content
    body = escape(c.text)
    if c.link_text and c.link_url and c.link_text in c.text:
        # Split the raw text so escaping never cuts through an entity
        before, _, after = c.text.partition(c.link_text)
        anchor = (
            f'<a href="{_attr(c.link_url)}" style="color: {LINK_COLOR}; text-decoration: underline;">'
            f"{escape(c.link_text)}</a>"
        )
        body = f"{escape(before)}{anchor}{escape(after)}"
    return _row(block, f'<p style="margin: 0; line-height: 1.6;">{body}</p>')


def _render_image(block: ImageBlock) -> str:
    c = block.content
    inner = _img(
        c.image_url,
        c.image_alt,
        c.image_width,
        c.image_height,
        "max-width: 100%; height: auto; display: block; margin: 0 auto;",
    )
    if c.link_url:
        inner = f'<a href="{_attr(c.link_url)}" style="display: inline-block;">{inner}</a>'
    inner = f'<div style="display: inline-block;">{inner}</div>'
    if c.caption:
        inner += (
            f'<p data-role="caption" style="margin: 8px 0 0 0; font-size: 12px; color: {MUTED_COLOR};">'
            f"{escape(c.caption)}</p>"
        )
    return _row(block, inner)


def _render_button(block: ButtonBlock) -> str:
    c = block.content
    look = BUTTON_STYLES.get(c.button_style, BUTTON_STYLES["primary"])
    if c.background_color:
        look = look.replace(look.split(";")[0], f"background-color: {c.background_color}", 1)
    style = _attr(
        f"display: inline-block; padding: 12px 24px; {look}; text-decoration: none; border-radius: 6px; "
        "font-family: Arial, sans-serif; font-size: 16px; font-weight: bold;"
    )
    inner = (
        f'<a href="{_attr(c.url)}" data-button-style="{_attr(c.button_style)}" style="{style}">'
        f"{escape(c.text)}</a>"
    )
    return _row(block, inner)


def _render_divider(block: DividerBlock) -> str:
    c = block.content
    if c.divider_type == "space":
        height = 20 if c.height is None else int(c.height)
        inner = f'<div data-role="spacer" style="height: {height}px; line-height: 0;"></div>'
    else:
        inner = (
            f'<hr style="border: none; border-top: {1 if c.thickness is None else int(c.thickness)}px solid #e5e7eb; '
            'margin: 20px 0; width: 100%;" />'
        )
    return _row(block, inner)


def _render_footer(block: FooterBlock) -> str:
    c = block.content
    parts: list[str] = []
    if c.company_name:
        parts.append(
            '<p data-role="company" style="margin: 0 0 10px 0; font-size: 14px; line-height: 1.4;">'
            f"<strong>{escape(c.company_name)}</strong></p>"
        )
    if c.address:
        parts.append(
            f'<p data-role="address" style="margin: 0 0 10px 0; font-size: 12px; line-height: 1.4; '
            f'color: {MUTED_COLOR};">{escape(c.address)}</p>'
        )
    if c.social_links:
        social = " | ".join(
            f'<a href="{_attr(link.url)}" data-platform="{_attr(link.platform)}" '
            f'style="color: {MUTED_COLOR}; text-decoration: none;">{escape(link.platform.capitalize())}</a>'
            for link in c.social_links
        )
        parts.append(f'<p data-role="social" style="margin: 0 0 10px 0; font-size: 12px;">{social}</p>')

    links: list[str] = []
    link_style = f"color: {MUTED_COLOR}; text-decoration: underline;"
    if c.unsubscribe_text and c.unsubscribe_url:
        links.append(
            f'<a href="{_attr(c.unsubscribe_url)}" data-role="unsubscribe" style="{link_style}">'
            f"{escape(c.unsubscribe_text)}</a>"
        )
    if c.privacy_policy_text and c.privacy_policy_url:
        links.append(
            f'<a href="{_attr(c.privacy_policy_url)}" data-role="privacy" style="{link_style}">'
            f"{escape(c.privacy_policy_text)}</a>"
        )
    if links:
        parts.append(
            f'<p data-role="links" style="margin: 10px 0 0 0; font-size: 12px; line-height: 1.4; '
            f'color: {MUTED_COLOR};">{" | ".join(links)}</p>'
        )

    # Footers are always centered
    return _row(block, "".join(parts), _styles_css(block.styles, force_align="center"))


def render_block(block: EmailBlock) -> str:
    """Render one block. Unknown kinds leave a comment and no row."""
    match block:
        case HeaderBlock():
            return _render_header(block)
        case HeroBlock():
            return _render_hero(block)
        case TextBlock():
            return _render_text(block)
        case ImageBlock():
            return _render_image(block)
        case ButtonBlock():
            return _render_button(block)
        case DividerBlock():
            return _render_divider(block)
        case FooterBlock():
            return _render_footer(block)
        case _:
            tag = _attr(getattr(block, "block_type", "") or "unknown").replace("--", "")
            return f"<!-- unsupported block: {tag} -->"


def render(document: EmailDocument | None) -> str:
    """Render a document's blocks, in order, inside the content table.

    Pure and deterministic. ``None`` gives an empty content region.
    """
    cfg = get_config()
    rows = "\n".join(render_block(block) for block in document.blocks) if document is not None else ""
    styles = document.global_styles if document is not None else None

    width = (styles and styles.container_width) or cfg.container_width
    background = (styles and styles.container_background_color) or cfg.container_background_color
    font = (styles and styles.font_family) or cfg.font_family

    return (
        f'<table class="email-blocks" width="{int(width)}" cellpadding="0" cellspacing="0" border="0" '
        f'style="{_attr(f"background-color: {background}; font-family: {font};")}">\n'
        f"{rows}\n"
        f"</table>"
    )


def render_email(document: EmailDocument | None) -> str:
    """Standalone HTML email for sending."""
    cfg = get_config()
    subject = (document.subject if document is not None else None) or "Email"
    background = (document.global_styles.background_color if document is not None else None) or cfg.background_color

    preheader = ""
    if document is not None and document.preheader:
        preheader = (
            '<div style="display: none; max-height: 0; overflow: hidden;">'
            f"{escape(document.preheader)}</div>\n"
        )

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{escape(subject)}</title>
</head>
<body style="margin: 0; padding: 0; background-color: {_attr(background)};">
{preheader}<table width="100%" cellpadding="0" cellspacing="0" border="0">
  <tr>
    <td align="center">
{render(document)}
    </td>
  </tr>
</table>
</body>
</html>"""


def to_structure(document: EmailDocument) -> dict[str, Any]:
    """Structured (camelCase, JSON-ready) form. ``orderId`` follows sequence position."""
    data = document.model_dump(by_alias=True, mode="json")
    for position, block in enumerate(data["blocks"], start=1):
        block["orderId"] = position
    return data
