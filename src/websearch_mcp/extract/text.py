from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field
from typing import Dict, Optional, Tuple

from bs4 import BeautifulSoup


UNTITLED = "Untitled"
TRUNCATION_MARKER = "..."

NOISE_TAGS = ["script", "style", "nav", "header", "footer", "aside"]

# (attribute, value) selectors per metadata field, in priority order
_META_SOURCES: Dict[str, Tuple[Tuple[str, str], ...]] = {
    "description": (("name", "description"), ("property", "og:description")),
    "keywords": (("name", "keywords"), ("name", "news_keywords")),
    "author": (("name", "author"), ("property", "article:author")),
    "published_date": (("property", "article:published_time"), ("name", "date")),
}

_WS_RX = re.compile(r"\s+")


@dataclass
class PageMetadata:
    description: Optional[str] = None
    keywords: Optional[str] = None
    author: Optional[str] = None
    published_date: Optional[str] = None

    def as_dict(self) -> Dict[str, str]:
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass
class PageContent:
    url: str
    title: str
    text: str = ""
    metadata: PageMetadata = field(default_factory=PageMetadata)


def _meta_content(soup: BeautifulSoup, attr: str, value: str) -> Optional[str]:
    tag = soup.find("meta", attrs={attr: value})
    if tag is None:
        return None
    content = tag.get("content")
    if isinstance(content, list):
        content = " ".join(content)
    if not content or not content.strip():
        return None
    return content


def extract_metadata(soup: BeautifulSoup) -> PageMetadata:
    found: Dict[str, str] = {}
    for name, sources in _META_SOURCES.items():
        for attr, value in sources:
            content = _meta_content(soup, attr, value)
            if content is not None:
                found[name] = content
                break
    return PageMetadata(**found)


def extract_title(soup: BeautifulSoup) -> str:
    if soup.title is not None:
        title = soup.title.get_text().strip()
        if title:
            return title
    return UNTITLED


def extract_body_text(soup: BeautifulSoup) -> str:
    """Visible body text with noise regions removed. Mutates ``soup``."""
    for tag in soup(NOISE_TAGS):
        tag.decompose()
    root = soup.body or soup
    return _WS_RX.sub(" ", root.get_text(" ")).strip()


def extract_page(html: str, url: str, want_text: bool = True, want_metadata: bool = True) -> PageContent:
    soup = BeautifulSoup(html or "", "html.parser")
    content = PageContent(url=url, title=extract_title(soup))
    if want_metadata:
        content.metadata = extract_metadata(soup)
    if want_text:
        content.text = extract_body_text(soup)
    return content


def excerpt(text: str, limit: int) -> str:
    """First ``limit`` characters of ``text``, with TRUNCATION_MARKER appended when cut."""
    if len(text) <= limit:
        return text
    return text[:limit] + TRUNCATION_MARKER
