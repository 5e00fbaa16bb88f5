"""
Readability extraction and HTML-to-Markdown conversion.

Both operations raise :class:`ExtractionError` on failure; deciding what to do
next is left to the extraction pipeline.
"""
from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup
from markdownify import MarkdownConverter
from readability import Document

from mdfetch.core.errors import ExtractionError

_NO_TITLE = "[no-title]"
_DROP_TAGS = ["script", "style", "noscript", "head"]

@dataclass(frozen=True)
class Article:
    title: str
    content_html: str
    byline: Optional[str] = None
    excerpt: Optional[str] = None


def _meta_content(soup: BeautifulSoup, *selectors: str) -> Optional[str]:
    for selector in selectors:
        tag = soup.select_one(selector)
        if tag and tag.get("content"):
            value = tag["content"].strip()
            if value:
                return value
    return None


class Extractor:
    """Thin wrapper over readability-lxml and markdownify."""

    def readability_extract(self, html: str, base_url: str) -> Article:
        try:
            doc = Document(html, url=base_url)
            content_html = doc.summary(html_partial=True)
            title = doc.short_title().strip()
        except Exception as e:
            raise ExtractionError(f"readability failed for {base_url}: {e}") from e

        if title == _NO_TITLE:
            title = ""

        soup = BeautifulSoup(html, "html.parser")
        byline = _meta_content(soup, 'meta[name="author"]', 'meta[property="article:author"]')
        excerpt = _meta_content(soup, 'meta[name="description"]', 'meta[property="og:description"]')
        return Article(title=title, content_html=content_html, byline=byline, excerpt=excerpt)

    def html_to_markdown(self, html: str) -> str:
        try:
            soup = BeautifulSoup(html, "html.parser")
            for tag in soup(_DROP_TAGS):
                tag.decompose()
            markdown = MarkdownConverter(heading_style="ATX").convert_soup(soup)
        except Exception as e:
            raise ExtractionError(f"markdown conversion failed: {e}") from e
        return _collapse_blank_lines(markdown)


def _collapse_blank_lines(text: str) -> str:
    lines = [line.rstrip() for line in text.splitlines()]
    out: list[str] = []
    for line in lines:
        if not line and out and not out[-1]:
            continue
        out.append(line)
    return "\n".join(out).strip()
