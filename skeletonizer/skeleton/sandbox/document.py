"""
Render Document - Wraps a markup fragment for layout in the sandbox.

The fragment is inserted into <body> verbatim. It is not parsed or
rewritten first: the browser's own parser decides how malformed markup
is laid out, exactly as it would on a real page.
"""

RENDER_TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <script src="{tailwind_url}"></script>
    <style>
      body {{ margin: 0; padding: {padding}px; }}
    </style>
  </head>
  <body>
{fragment}
  </body>
</html>
"""


def build_render_document(
    fragment: str,
    tailwind_url: str = "https://cdn.tailwindcss.com",
    body_padding_px: int = 16,
) -> str:
    """
    Build the full document the sandbox loads.

    Args:
        fragment: Untrusted markup to lay out
        tailwind_url: Styling runtime loaded in <head>
        body_padding_px: Padding applied to <body>

    Returns:
        Complete HTML document string
    """
    return RENDER_TEMPLATE.format(
        tailwind_url=tailwind_url,
        padding=body_padding_px,
        fragment=fragment,
    )
