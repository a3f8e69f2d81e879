"""
Helpers Module - Small text and URL utilities shared by renderers and routes
"""

from urllib.parse import urlsplit, urlunsplit, parse_qsl, urlencode

from markupsafe import Markup

from .localization import LOCALE_PARAM


def format_about(text: str) -> Markup:
    """Escape the about text and turn its newlines into <br> tags.

    Only ``&``, ``<`` and ``>`` are replaced, so the result is the sole
    fragment of the page that carries markup built from content.
    """
    if not text:
        return Markup('')

    escaped = (text
               .replace('&', '&amp;')
               .replace('<', '&lt;')
               .replace('>', '&gt;')
               .replace('\n', '<br>'))
    return Markup(escaped)


def build_lang_url(url: str, locale: str) -> str:
    """Return url with its ``lang`` query parameter set to locale"""
    parts = urlsplit(url)
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != LOCALE_PARAM]
    query.append((LOCALE_PARAM, locale))
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(query), parts.fragment))


__all__ = [
    'format_about',
    'build_lang_url'
]
