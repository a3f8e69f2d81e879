"""
Portfolio Routes - The public portfolio page
"""

from flask import render_template, request, current_app
from extensions import portfolio_content
from utils.content import ContentLoadError
from utils.helpers import build_lang_url
from utils.localization import LOCALE_PARAM, resolve_locale, next_locale, get_labels, DEFAULT_LOCALE
from utils.renderers import render_all_sections
from utils.session_state import load_controller, store_controller
from . import portfolio_bp


@portfolio_bp.route('/')
def index():
    """Portfolio page in the locale named by ?lang, else the default"""
    locale = resolve_locale(request.args.get(LOCALE_PARAM))

    try:
        state = portfolio_content.manager.load(locale)
    except ContentLoadError as e:
        # Nothing is rendered without content; the page shell is all there is
        current_app.logger.error(f"Failed to initialize portfolio: {str(e)}")
        return render_template('index.html',
                               page=None,
                               lightbox=None,
                               drawer_open=False,
                               labels=get_labels(DEFAULT_LOCALE),
                               toggle_url=None), 503

    controller = load_controller(state)
    controller.locale = state.locale
    store_controller(controller)

    page = render_all_sections(state)
    current_app.logger.info(f"Rendered portfolio page ({state.locale})")

    return render_template('index.html',
                           page=page,
                           lightbox=controller.lightbox,
                           drawer_open=controller.drawer.is_open,
                           labels=get_labels(state.locale),
                           toggle_url=build_lang_url(request.full_path, next_locale(state.locale)))
