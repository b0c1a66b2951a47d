"""HTML snippets for messages shown in rich-text labels."""

from html import escape

ERROR_COLOR = "#ff0000"


def error_message(text: str) -> str:
    """Wrap text in red bold error highlighting."""
    return f'<span style="color: {ERROR_COLOR}; font-weight: bold">{escape(text)}</span>'
