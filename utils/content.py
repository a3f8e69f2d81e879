"""
Content Module - Loading portfolio content for a locale
Fetches the locale document and the shared social document, with a single
fallback to the default locale when a translated document cannot be loaded.
"""

import json
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from urllib.parse import urljoin

import requests
from flask import current_app

from models import AppState, ContentFormatError, PortfolioDocument, SocialDocument
from .localization import DEFAULT_LOCALE, resolve_locale


SOCIAL_RESOURCE = 'data/social.json'


class ContentLoadError(Exception):
    """Raised when a content document cannot be fetched or parsed"""

    def __init__(self, message, resource=None, locale=None):
        super().__init__(message)
        self.resource = resource
        self.locale = locale


def content_resource(locale):
    """Path of the portfolio document for a locale"""
    if locale == DEFAULT_LOCALE:
        return 'data/portfolio.json'
    return f'data/portfolio_{locale}.json'


class ContentSource:
    """
    Reads JSON documents from an HTTP origin or a local directory

    With ``base_url`` set every resource is requested over HTTP; otherwise it
    is read from ``content_dir``. Both paths raise ContentLoadError for
    transport failures, non-2xx responses, missing files and bad JSON.
    """

    def __init__(self, base_url=None, content_dir=None, timeout=10):
        self.base_url = base_url
        self.content_dir = content_dir
        self.timeout = timeout

    @classmethod
    def from_config(cls, config):
        return cls(
            base_url=config.get('CONTENT_BASE_URL'),
            content_dir=config.get('CONTENT_DIR'),
            timeout=config.get('CONTENT_FETCH_TIMEOUT', 10)
        )

    def fetch(self, resource):
        if self.base_url:
            return self._fetch_http(resource)
        return self._fetch_file(resource)

    def _fetch_http(self, resource):
        url = urljoin(self.base_url.rstrip('/') + '/', resource)
        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise ContentLoadError(f'Failed to load {resource}: {str(e)}', resource=resource) from e

        if not response.ok:
            raise ContentLoadError(f'Failed to load {resource}: {response.status_code}', resource=resource)

        try:
            return response.json()
        except ValueError as e:
            raise ContentLoadError(f'Invalid JSON in {resource}: {str(e)}', resource=resource) from e

    def _fetch_file(self, resource):
        if not self.content_dir:
            raise ContentLoadError('No content source configured', resource=resource)

        path = os.path.join(self.content_dir, *resource.split('/'))
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ContentLoadError(f'Invalid JSON in {resource}: {str(e)}', resource=resource) from e
        except OSError as e:
            raise ContentLoadError(f'Failed to load {resource}: {str(e)}', resource=resource) from e


def build_image_refs(projects):
    """Full/thumbnail pairs for the lightbox, one per project"""
    return tuple(project.image_ref() for project in projects)


def _parse(parser, payload, resource, locale):
    try:
        return parser(payload)
    except ContentFormatError as e:
        raise ContentLoadError(str(e), resource=resource, locale=locale) from e


def _load_social(future):
    """Social document from a finished fetch, or None when it is unavailable"""
    try:
        social = _parse(SocialDocument.from_dict, future.result(), SOCIAL_RESOURCE, None)
    except ContentLoadError as e:
        current_app.logger.warning(f"Social links unavailable: {str(e)}")
        return None
    current_app.logger.info("Loaded social data")
    return social


def load_content(state, locale, source):
    """
    Load the portfolio for a locale

    The locale document and (when not cached on ``state``) the social
    document are fetched concurrently and joined. A social document that
    cannot be loaded leaves the page without social links and is retried on
    the next load. A locale document failure for any locale but the default
    is retried once against the default locale.

    Args:
        state (AppState): Current state; its social document is reused
        locale (str): Locale to load
        source (ContentSource): Where documents come from

    Returns:
        AppState: The freshly loaded state

    Raises:
        ContentLoadError: if the default locale itself cannot be loaded
    """
    locale = resolve_locale(locale)
    resource = content_resource(locale)
    social = state.social if state is not None else None
    current_app.logger.info(f"Loading {locale} content from {resource}")

    try:
        with ThreadPoolExecutor(max_workers=2) as executor:
            portfolio_future = executor.submit(source.fetch, resource)
            social_future = executor.submit(source.fetch, SOCIAL_RESOURCE) if social is None else None

            payload = portfolio_future.result()
            if social_future is not None:
                social = _load_social(social_future)

        document = _parse(PortfolioDocument.from_dict, payload, resource, locale)

    except ContentLoadError as e:
        e.locale = e.locale or locale
        if locale != DEFAULT_LOCALE:
            current_app.logger.warning(f"Could not load {locale} content ({str(e)}), falling back to {DEFAULT_LOCALE}")
            return load_content(state, DEFAULT_LOCALE, source)
        current_app.logger.error(f"Error loading {locale} content: {str(e)}")
        raise

    current_app.logger.info(f"Loaded {locale} content: {len(document.projects)} projects")
    return AppState(
        locale=locale,
        document=document,
        social=social,
        images=build_image_refs(document.projects),
        token=state.token if state is not None else 0
    )


class PortfolioManager:
    """
    Holds the single active AppState for the application

    Loads may overlap because requests are served on several threads. Each
    load takes a token; a result is committed only if no load with a newer
    token has been committed, so the latest request always wins.
    """

    def __init__(self, source):
        self.source = source
        self._lock = threading.Lock()
        self._state = AppState(locale=DEFAULT_LOCALE)
        self._issued = 0

    @property
    def state(self):
        with self._lock:
            return self._state

    def _next_token(self):
        with self._lock:
            self._issued += 1
            return self._issued, self._state

    def _commit(self, state):
        with self._lock:
            if state.token < self._state.token:
                return False
            # A later load may already have cached the social document
            if state.social is None and self._state.social is not None:
                state = AppState(state.locale, state.document, self._state.social, state.images, state.token)
            self._state = state
            return True

    def load(self, locale):
        """
        Load a locale and make it the active state

        Returns:
            AppState: the state produced by this load, even when a newer
            load has superseded it
        """
        token, base = self._next_token()
        loaded = load_content(base, locale, self.source)
        loaded = AppState(loaded.locale, loaded.document, loaded.social, loaded.images, token)

        if not self._commit(loaded):
            current_app.logger.debug(f"Discarding stale {loaded.locale} load (token {token})")
        return loaded

    def current(self, locale):
        """Active state when it already holds ``locale``, otherwise a fresh load"""
        state = self.state
        if state.document is not None and state.locale == resolve_locale(locale):
            return state
        return self.load(locale)

    def reset(self):
        with self._lock:
            self._state = AppState(locale=DEFAULT_LOCALE)
            self._issued = 0


__all__ = [
    'SOCIAL_RESOURCE',
    'ContentLoadError',
    'ContentSource',
    'content_resource',
    'build_image_refs',
    'load_content',
    'PortfolioManager'
]
