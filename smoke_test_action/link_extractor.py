"""Extract same-host links from an HTML page.

Anchors are found with a regular expression rather than a full HTML parse.
Malformed markup (unquoted ``href`` values, attributes split by unusual
whitespace, anchors inside comments or scripts) can be missed or picked up
spuriously; that is an accepted limitation for a homepage smoke check.
"""

import logging
import re
from collections.abc import Sequence
from urllib.parse import urlsplit

log = logging.getLogger(__name__)

ANCHOR_HREF_PATTERN = re.compile(
    r"""<a\s+(?:[^>]*?\s+)?href=(["'])(.*?)\1""", re.IGNORECASE | re.DOTALL
)
SKIPPED_PREFIXES = ("#", "javascript:", "mailto:", "tel:")
DEFAULT_PORTS = {"http": 80, "https": 443}


def extract_links(html: str, base_url: str) -> Sequence[str]:
    """Return absolute same-host URLs linked from ``html``.

    Args:
        html: Page markup
        base_url: URL the page was fetched from

    Returns:
        Unique absolute URLs in order of first appearance

    """
    base = urlsplit(base_url)
    base_host = host_of(base_url)
    links: dict[str, None] = {}

    for match in ANCHOR_HREF_PATTERN.finditer(html):
        href = match.group(2).strip()
        if href.lower().startswith(SKIPPED_PREFIXES):
            continue

        if href.startswith(("http://", "https://")):
            absolute_url = href
        elif href.startswith("/"):
            absolute_url = f"{base.scheme}://{base.netloc}{href}"
        else:
            absolute_url = f"{base.scheme}://{base.netloc}/{href}"

        link_host = host_of(absolute_url)
        if link_host is None or link_host != base_host:
            log.debug("Skipping off-site link %s", absolute_url)
            continue

        links.setdefault(absolute_url, None)

    return list(links)


def host_of(url: str) -> str | None:
    """Return ``host[:port]`` of ``url``, omitting the scheme's default port.

    Returns None when the URL has no host or an invalid port.
    """
    parts = urlsplit(url)
    if not parts.hostname:
        return None
    try:
        port = parts.port
    except ValueError:
        return None
    if port is None or port == DEFAULT_PORTS.get(parts.scheme):
        return parts.hostname
    return f"{parts.hostname}:{port}"
