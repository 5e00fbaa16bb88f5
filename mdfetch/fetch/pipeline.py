import logging
from typing import Optional

from mdfetch.core.errors import ExtractionError
from .base import ExtractedContent, RawFetchResult
from .extractor import Extractor
from .utils import is_html

logger = logging.getLogger(__name__)

class ExtractionPipeline:
    """
    Turns a raw fetch result into display text.

    HTML goes through readability and Markdown conversion, falling back to a
    whole-page conversion and finally to the untouched body. Nothing here
    raises: a successful fetch always yields some text.
    """

    def __init__(self, extractor: Optional[Extractor] = None):
        self.extractor = extractor or Extractor()

    def extract(self, result: RawFetchResult, raw: bool = False) -> ExtractedContent:
        if raw:
            logger.debug("raw mode enabled url=%s", result.final_url)
            text = result.body
        elif is_html(result.content_type):
            text = self._html_to_text(result.body, result.final_url)
        else:
            logger.debug("non-HTML content url=%s content_type=%s", result.final_url, result.content_type)
            text = result.body

        return ExtractedContent(
            text=text,
            content_type=result.content_type,
            status_code=result.status_code,
            final_url=result.final_url,
            original_url=result.original_url,
        )

    def _html_to_text(self, html: str, url: str) -> str:
        try:
            article = self.extractor.readability_extract(html, url)
            markdown = self.extractor.html_to_markdown(article.content_html)
        except ExtractionError as e:
            logger.warning("readability extraction failed, converting whole page url=%s error=%s", url, e)
        else:
            parts = []
            if article.title:
                parts.append(f"# {article.title}\n\n")
            parts.append(markdown)
            footer = article.byline or article.excerpt
            if footer:
                parts.append(f"\n\n---\n\n{footer}")
            text = "".join(parts)
            logger.debug("processed HTML to Markdown url=%s title=%r markdown_length=%d", url, article.title, len(text))
            return text

        try:
            return self.extractor.html_to_markdown(html)
        except ExtractionError as e:
            logger.warning("markdown conversion failed, returning raw body url=%s error=%s", url, e)
            return html
