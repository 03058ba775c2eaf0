"""HTML fragments for the weather slots. Provider text is always escaped."""
import html
from typing import Iterable, Optional


def slot_html(css_class: str, text: Optional[str]) -> str:
    return f'<div class="{css_class}">{html.escape(text or "")}</div>'


def details_html(lines: Iterable[str]) -> str:
    body = "<br>".join(html.escape(line) for line in lines)
    return f'<div class="details">{body}</div>'
