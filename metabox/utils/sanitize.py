"""
Input Sanitization Utilities

Sanitizers applied to submitted field values before they are stored.
"""

import re
from collections.abc import Callable, Iterable
from typing import List, Optional

import bleach

# Allowed tags for rich-text field content
RICH_CONTENT_TAGS = [
    'p', 'br', 'strong', 'em', 'u', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    'blockquote', 'code', 'pre', 'hr', 'ul', 'ol', 'li', 'a', 'img',
    'table', 'thead', 'tbody', 'tr', 'th', 'td', 'div', 'span'
]

# Allowed attributes for rich-text field content
RICH_CONTENT_ATTRS = {
    'a': ['href', 'title', 'target', 'rel'],
    'img': ['src', 'alt', 'title', 'width', 'height'],
    'code': ['class'],
    'pre': ['class'],
    'div': ['class'],
    'span': ['class'],
    'table': ['class'],
}

# Allowed protocols for URLs
ALLOWED_PROTOCOLS = ['http', 'https', 'mailto']

# Percent-encoded octets are dropped from plain text
_OCTET_RE = re.compile(r'%[a-fA-F0-9]{2}')

ContentFilter = Callable[[str], str]


def sanitize_html(
    text: Optional[str],
    tags: Optional[List[str]] = None,
    attributes: Optional[dict] = None,
    strip: bool = False
) -> str:
    """
    Sanitize HTML content to prevent XSS attacks.

    Args:
        text: The HTML text to sanitize
        tags: List of allowed HTML tags (default: RICH_CONTENT_TAGS)
        attributes: Dict of allowed attributes per tag (default: RICH_CONTENT_ATTRS)
        strip: If True, strip all HTML tags

    Returns:
        Sanitized HTML string
    """
    if text is None:
        return ""

    if strip:
        return bleach.clean(text, tags=[], strip=True)

    allowed_tags = tags if tags is not None else RICH_CONTENT_TAGS
    allowed_attrs = attributes if attributes is not None else RICH_CONTENT_ATTRS

    return bleach.clean(
        text,
        tags=allowed_tags,
        attributes=allowed_attrs,
        protocols=ALLOWED_PROTOCOLS,
        strip=False  # Keep tag markers for non-allowed tags
    )


def sanitize_plain_text(text: Optional[str]) -> str:
    """
    Sanitize a single-line text field value.

    Strips all HTML tags, drops percent-encoded octets, collapses
    line breaks, tabs and runs of whitespace into single spaces and trims
    the result.

    Args:
        text: The submitted text

    Returns:
        Plain text safe to store
    """
    if text is None:
        return ""

    # bleach escapes what it leaves behind; unescape the basic entities
    cleaned = bleach.clean(text, tags=[], strip=True)
    cleaned = cleaned.replace('&lt;', '<').replace('&gt;', '>').replace('&amp;', '&')

    cleaned = _OCTET_RE.sub('', cleaned)
    cleaned = re.sub(r'\s+', ' ', cleaned).strip()

    return cleaned


def sanitize_rich_content(text: Optional[str]) -> str:
    """Sanitize rich HTML content - allow formatting tags"""
    return sanitize_html(
        text,
        tags=RICH_CONTENT_TAGS,
        attributes=RICH_CONTENT_ATTRS
    )


def filter_rich_text(text: Optional[str], filters: Iterable[ContentFilter] = ()) -> str:
    """
    Run a rich-text value through the content filter pipeline.

    The value is sanitized first, then each filter is applied in order
    with the previous filter's output.

    Args:
        text: The submitted HTML
        filters: Content transforms registered by the host

    Returns:
        The filtered HTML
    """
    content = sanitize_rich_content(text)
    for content_filter in filters:
        content = content_filter(content)
    return content


def autop(text: str) -> str:
    """
    Wrap blank-line separated blocks of text in paragraphs.

    Blocks already starting with a block-level tag are left alone and single
    newlines inside a block become <br />.
    """
    blocks = [block.strip() for block in re.split(r'\n\s*\n', text.replace('\r\n', '\n')) if block.strip()]
    wrapped = []
    for block in blocks:
        if re.match(r'<(p|div|h[1-6]|ul|ol|table|blockquote|pre|hr)\b', block):
            wrapped.append(block)
        else:
            wrapped.append('<p>' + block.replace('\n', '<br />\n') + '</p>')
    return '\n'.join(wrapped)
