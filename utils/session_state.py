"""
Session State Module - Keeps each visitor's interaction state in the session
"""

from flask import session, current_app

from .interaction import InteractionController


SESSION_KEY = 'interaction'


def load_controller(state):
    """Controller for this visitor, bound to the images of a loaded state"""
    return InteractionController.from_dict(
        session.get(SESSION_KEY),
        images=state.images,
        swipe_threshold=current_app.config.get('SWIPE_THRESHOLD_PX', 50),
        nav_delay_ms=current_app.config.get('NAV_SCROLL_DELAY_MS', 350)
    )


def store_controller(controller):
    session[SESSION_KEY] = controller.to_dict()


def session_locale():
    return (session.get(SESSION_KEY) or {}).get('locale')


__all__ = [
    'SESSION_KEY',
    'load_controller',
    'store_controller',
    'session_locale'
]
