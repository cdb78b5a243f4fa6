"""Standalone share page around rendered email markup (what the screenshot sees)."""

from html import escape

from mailcanvas.common.utils.config import get_config
from mailcanvas.common.utils.text import sanitize_text

PAGE_CSS = """
    body {
      margin: 0;
      padding: 20px;
      font-family: Arial, sans-serif;
      background: linear-gradient(135deg, #f0f9ff 0%, #ffffff 50%, #faf5ff 100%);
      min-height: 100vh;
    }
    .email-container {
      max-width: 600px;
      margin: 0 auto;
      background: white;
      border-radius: 12px;
      box-shadow: 0 8px 32px rgba(0, 0, 0, 0.1);
      overflow: hidden;
    }
    .header {
      background: #f9fafb;
      padding: 20px;
      border-bottom: 1px solid #e5e7eb;
      display: flex;
      align-items: center;
      gap: 12px;
    }
    .logo {
      width: 32px;
      height: 32px;
      background: #3b82f6;
      border-radius: 50%;
      display: flex;
      align-items: center;
      justify-content: center;
      color: white;
      font-weight: bold;
      font-size: 14px;
    }
    .brand {
      font-weight: bold;
      font-size: 18px;
      color: #000;
    }
    .email-content {
      padding: 0;
    }
    .footer {
      background: #f9fafb;
      padding: 15px 20px;
      border-top: 1px solid #e5e7eb;
      text-align: center;
      font-size: 12px;
      color: #6b7280;
    }
"""


def wrap_page(markup: str, title: str, author: str) -> str:
    """Wrap rendered email markup in the share-page chrome.

    Title and author are sanitized then escaped. ``markup`` is inserted as is.
    """
    product = get_config().product_name
    safe_title = escape(sanitize_text(title))
    safe_author = escape(sanitize_text(author))
    logo = escape(product[:1].upper() or "M")

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{safe_title}</title>
  <style>{PAGE_CSS}  </style>
</head>
<body>
  <div class="email-container">
    <div class="header">
      <div class="logo">{logo}</div>
      <div class="brand">{escape(product)}</div>
    </div>
    <div class="email-content">
{markup}
    </div>
    <div class="footer">
      Shared by {safe_author} • Created with {escape(product)}
    </div>
  </div>
</body>
</html>"""
