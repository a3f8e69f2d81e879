"""
Interaction Module - Lightbox, mobile navigation drawer and event wiring
State machines for the page's interactive parts. Events come in as plain
dicts (what the browser reports), and every transition returns the list of
Effects the page has to carry out.
"""

import math
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from models import ImageRef
from .localization import DEFAULT_LOCALE, resolve_locale, next_locale


SWIPE_THRESHOLD_PX = 50
NAV_SCROLL_DELAY_MS = 350


class InteractionError(ValueError):
    """Raised for a transition the current state does not allow"""


@dataclass(frozen=True)
class Effect:
    kind: str
    data: Dict = field(default_factory=dict)

    def to_dict(self):
        return {'kind': self.kind, **self.data}


@dataclass
class PageBody:
    """Scroll offset and the body styles used to lock scrolling"""

    scroll_offset: int = 0
    overflow: str = ''
    position: str = ''
    top: str = ''
    width: str = ''

    @property
    def is_fixed(self):
        return self.position == 'fixed'

    def fix(self):
        self.overflow = 'hidden'
        self.position = 'fixed'
        self.top = f'-{self.scroll_offset}px'
        self.width = '100%'

    def release(self):
        self.overflow = ''
        self.position = ''
        self.top = ''
        self.width = ''

    def style(self):
        return {'overflow': self.overflow, 'position': self.position, 'top': self.top, 'width': self.width}

    def to_dict(self):
        return {'scroll_offset': self.scroll_offset, **self.style()}

    @classmethod
    def from_dict(cls, data):
        data = data or {}
        return cls(
            scroll_offset=int(data.get('scroll_offset', 0)),
            overflow=data.get('overflow', ''),
            position=data.get('position', ''),
            top=data.get('top', ''),
            width=data.get('width', '')
        )


class Lightbox:
    """
    Full-size image viewer over the project list

    Closed when ``index`` is None, otherwise Open(index). Navigation wraps
    around in both directions.
    """

    def __init__(self, images: Sequence[ImageRef] = (), index: Optional[int] = None, saved_offset: int = 0):
        self.images = tuple(images)
        self.index = index
        self.saved_offset = saved_offset

    @property
    def is_open(self):
        return self.index is not None

    @property
    def current(self):
        if not self.is_open:
            return None
        return self.images[self.index]

    def _show(self, opacity):
        image = self.current
        return Effect('load_image', {'index': self.index, 'src': image.full, 'alt': image.title,
                                     'opacity': opacity})

    def open(self, index, body):
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self.images):
            raise InteractionError(f'No image at index {index!r} ({len(self.images)} images)')

        self.index = index
        if not body.is_fixed:
            self.saved_offset = body.scroll_offset
            body.fix()
        return [Effect('modal', {'active': True}), self._show('0'), Effect('body_style', body.style())]

    def close(self, body):
        if not self.is_open:
            return []

        self.index = None
        body.release()
        body.scroll_offset = self.saved_offset
        return [
            Effect('modal', {'active': False}),
            Effect('body_style', body.style()),
            Effect('scroll_to', {'top': self.saved_offset, 'left': 0, 'behavior': 'instant'})
        ]

    def previous(self):
        if not self.is_open:
            raise InteractionError('Lightbox is closed')
        self.index = (self.index - 1 + len(self.images)) % len(self.images)
        return [self._show('0.5')]

    def next(self):
        if not self.is_open:
            raise InteractionError('Lightbox is closed')
        self.index = (self.index + 1) % len(self.images)
        return [self._show('0.5')]

    def set_images(self, images, body):
        """Swap in the image list of a new load; indices from the old one are void"""
        self.images = tuple(images)
        if self.is_open and self.index >= len(self.images):
            return self.close(body)
        return []

    def to_dict(self):
        return {'index': self.index, 'saved_offset': self.saved_offset}


class NavDrawer:
    """Mobile navigation drawer, closed or open"""

    def __init__(self, is_open=False):
        self.is_open = is_open

    def toggle(self, body):
        self.is_open = not self.is_open
        body.overflow = 'hidden' if self.is_open else ''
        return [Effect('drawer', {'active': self.is_open}), Effect('body_style', body.style())]

    def close(self, body):
        self.is_open = False
        body.overflow = ''
        return [Effect('drawer', {'active': False}), Effect('body_style', body.style())]

    def navigate(self, target, body, delay_ms=NAV_SCROLL_DELAY_MS):
        """Close first, then scroll once the closing animation has settled"""
        effects = self.close(body)
        effects.append(Effect('scroll_into_view', {'target': target, 'delay_ms': delay_ms}))
        return effects


class SwipeTracker:
    def __init__(self, threshold=SWIPE_THRESHOLD_PX, start_x=0, start_y=0):
        self.threshold = threshold
        self.start_x = start_x
        self.start_y = start_y

    def start(self, x, y):
        self.start_x = x
        self.start_y = y

    def end(self, x, y):
        """'previous' for a rightward swipe, 'next' for a leftward one, else None"""
        dx = x - self.start_x
        dy = y - self.start_y
        if abs(dx) > abs(dy) and abs(dx) > self.threshold:
            return 'previous' if dx > 0 else 'next'
        return None


def _as_index(value):
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _as_number(event, key):
    """Numeric field of an event; absent means 0"""
    value = event.get(key, 0)
    if not isinstance(value, bool):
        try:
            number = float(value)
        except (TypeError, ValueError):
            pass
        else:
            if math.isfinite(number):
                return number
    raise InteractionError(f"Event field {key!r} must be a finite number, got {value!r}")


def _target_id(href):
    if href and href.startswith('#') and len(href) > 1:
        return href[1:]
    return None


class InteractionController:
    """
    Routes page events to the lightbox, the drawer and the locale toggle

    Handlers subscribe per event type with ``on``; ``dispatch`` runs every
    handler for the event and concatenates their effects.
    """

    def __init__(self, images: Sequence[ImageRef] = (), locale=DEFAULT_LOCALE, body=None,
                 lightbox=None, drawer=None, swipe=None, nav_delay_ms=NAV_SCROLL_DELAY_MS):
        self.locale = resolve_locale(locale)
        self.body = body or PageBody()
        self.lightbox = lightbox or Lightbox(images)
        self.drawer = drawer or NavDrawer()
        self.swipe = swipe or SwipeTracker()
        self.nav_delay_ms = nav_delay_ms
        self._handlers: Dict[str, List[Callable]] = {}
        self._bind_defaults()

    def on(self, event_type, handler):
        self._handlers.setdefault(event_type, []).append(handler)

    def dispatch(self, event):
        event_type = event.get('type')
        effects = []
        for handler in self._handlers.get(event_type, []):
            effects.extend(handler(event) or [])
        return effects

    def _bind_defaults(self):
        self.on('click', self._handle_lightbox_click)
        self.on('click', self._handle_drawer_click)
        self.on('click', self._handle_page_click)
        self.on('keydown', self._handle_lightbox_key)
        self.on('keydown', self._handle_drawer_key)
        self.on('touchstart', self._handle_touchstart)
        self.on('touchend', self._handle_touchend)
        self.on('scroll', self._handle_scroll)

    # Lightbox

    def _handle_lightbox_click(self, event):
        target = event.get('target')
        if target == 'project-image':
            return self.lightbox.open(_as_index(event.get('index')), self.body)
        if target in ('modal-close', 'modal-overlay'):
            return self.lightbox.close(self.body)
        if target == 'modal-prev':
            return self.lightbox.previous()
        if target == 'modal-next':
            return self.lightbox.next()
        return []

    def _handle_lightbox_key(self, event):
        if not self.lightbox.is_open:
            return []
        key = event.get('key')
        if key == 'Escape':
            return self.lightbox.close(self.body)
        if key == 'ArrowLeft':
            return self.lightbox.previous()
        if key == 'ArrowRight':
            return self.lightbox.next()
        return []

    def _handle_touchstart(self, event):
        self.swipe.start(_as_number(event, 'x'), _as_number(event, 'y'))
        return []

    def _handle_touchend(self, event):
        if not self.lightbox.is_open:
            return []
        direction = self.swipe.end(_as_number(event, 'x'), _as_number(event, 'y'))
        if direction == 'previous':
            return self.lightbox.previous()
        if direction == 'next':
            return self.lightbox.next()
        return []

    # Navigation drawer

    def _handle_drawer_click(self, event):
        target = event.get('target')
        if target == 'menu-toggle':
            return self.drawer.toggle(self.body)
        if target in ('mobile-nav-overlay', 'mobile-nav-close'):
            return self.drawer.close(self.body)
        if target == 'mobile-nav-link':
            return self.drawer.navigate(_target_id(event.get('href')), self.body, self.nav_delay_ms)
        return []

    def _handle_drawer_key(self, event):
        if event.get('key') == 'Escape' and self.drawer.is_open:
            return self.drawer.close(self.body)
        return []

    # Page

    def _handle_page_click(self, event):
        target = event.get('target')
        if target == 'language-toggle':
            return self.toggle_locale()
        if target == 'anchor':
            section = _target_id(event.get('href'))
            if section:
                return [Effect('scroll_into_view', {'target': section, 'behavior': 'smooth'})]
        return []

    def _handle_scroll(self, event):
        # The recorded offset survives scrolling while the lightbox is open
        self.body.scroll_offset = int(_as_number(event, 'offset'))
        return []

    def toggle_locale(self):
        return [Effect('loading', {'active': True}),
                Effect('toggle_locale', {'locale': next_locale(self.locale)})]

    def locale_loaded(self, locale, images):
        """Adopt the locale and image list a toggle ended up loading"""
        self.locale = resolve_locale(locale)
        effects = self.lightbox.set_images(images, self.body)
        effects.append(Effect('loading', {'active': False}))
        return effects

    def to_dict(self):
        return {
            'locale': self.locale,
            'body': self.body.to_dict(),
            'lightbox': self.lightbox.to_dict(),
            'drawer': {'open': self.drawer.is_open},
            'swipe': {'x': self.swipe.start_x, 'y': self.swipe.start_y}
        }

    @classmethod
    def from_dict(cls, data, images=(), swipe_threshold=SWIPE_THRESHOLD_PX, nav_delay_ms=NAV_SCROLL_DELAY_MS):
        """Rebuild a controller from ``to_dict`` output over the current image list"""
        data = data or {}
        lightbox_data = data.get('lightbox') or {}
        images = tuple(images)

        index = lightbox_data.get('index')
        if index is not None and not 0 <= index < len(images):
            index = None

        swipe_data = data.get('swipe') or {}
        return cls(
            images=images,
            locale=data.get('locale', DEFAULT_LOCALE),
            body=PageBody.from_dict(data.get('body')),
            lightbox=Lightbox(images, index=index, saved_offset=lightbox_data.get('saved_offset', 0)),
            drawer=NavDrawer(bool((data.get('drawer') or {}).get('open', False))),
            swipe=SwipeTracker(swipe_threshold, swipe_data.get('x', 0), swipe_data.get('y', 0)),
            nav_delay_ms=nav_delay_ms
        )


__all__ = [
    'SWIPE_THRESHOLD_PX',
    'NAV_SCROLL_DELAY_MS',
    'InteractionError',
    'Effect',
    'PageBody',
    'Lightbox',
    'NavDrawer',
    'SwipeTracker',
    'InteractionController'
]
