"""Conversion of rendered cell markup to plain comparable text."""

from __future__ import annotations

from bs4 import BeautifulSoup

# Elements whose text never shows up in a rendered cell
_INVISIBLE_ELEMENTS = ["script", "style", "head", "meta", "link"]


def strip_markup(html: str | None) -> str:
    """
    Strip tags and decode entities from *html*.

    Plain strings without tag or entity characters are returned unchanged.

    Examples:
        >>> strip_markup("<b>Tom</b> &amp; Jerry")
        'Tom & Jerry'
    """
    if not html:
        return ""
    if "<" not in html and "&" not in html:
        return html

    soup = BeautifulSoup(html, "html.parser")
    for element in soup(_INVISIBLE_ELEMENTS):
        element.decompose()
    return soup.get_text()
