"""
Utils Package - Centralized utility modules initialization
"""

from .localization import (
    SUPPORTED_LOCALES,
    DEFAULT_LOCALE,
    LocalizationError,
    validate_labels,
    resolve_locale,
    resolve_locale_from_url,
    next_locale,
    get_labels
)
from .content import ContentLoadError, ContentSource, PortfolioManager, load_content
from .icons import get_link_icon, get_social_icon, get_skill_category
from .helpers import format_about, build_lang_url
from .renderers import Fragment, RenderedPage, render_all_sections, render_nav_labels
from .interaction import (
    InteractionError,
    Effect,
    PageBody,
    Lightbox,
    NavDrawer,
    InteractionController
)

__all__ = [
    # Localization
    'SUPPORTED_LOCALES',
    'DEFAULT_LOCALE',
    'LocalizationError',
    'validate_labels',
    'resolve_locale',
    'resolve_locale_from_url',
    'next_locale',
    'get_labels',

    # Content
    'ContentLoadError',
    'ContentSource',
    'PortfolioManager',
    'load_content',

    # Icons
    'get_link_icon',
    'get_social_icon',
    'get_skill_category',

    # Helpers
    'format_about',
    'build_lang_url',

    # Rendering
    'Fragment',
    'RenderedPage',
    'render_all_sections',
    'render_nav_labels',

    # Interaction
    'InteractionError',
    'Effect',
    'PageBody',
    'Lightbox',
    'NavDrawer',
    'InteractionController'
]
