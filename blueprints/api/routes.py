"""
API Routes - Section fragments and interaction events
"""

from flask import jsonify, request, current_app, url_for
from extensions import portfolio_content
from utils.content import ContentLoadError
from utils.helpers import build_lang_url
from utils.interaction import Effect, InteractionError
from utils.localization import LOCALE_PARAM, resolve_locale
from utils.renderers import render_all_sections
from utils.session_state import load_controller, store_controller, session_locale
from . import api_bp


def sections_payload(state):
    """Rendered sections of a state plus what the page needs to swap them in"""
    payload = render_all_sections(state).to_dict()
    payload['url'] = build_lang_url(url_for('portfolio.index'), state.locale)
    payload['images'] = [image.to_dict() for image in state.images]
    return payload


@api_bp.route('/sections')
def sections():
    """Fragments for every mount point in the requested locale"""
    locale = resolve_locale(request.args.get(LOCALE_PARAM))
    try:
        state = portfolio_content.manager.load(locale)
    except ContentLoadError as e:
        current_app.logger.error(f"Failed to load sections for {locale}: {str(e)}")
        return jsonify({'status': 'error'}), 503

    return jsonify(sections_payload(state))


@api_bp.route('/interaction', methods=['POST'])
def interaction():
    """Apply one page event and return the effects it produced"""
    event = request.get_json(silent=True)
    if not isinstance(event, dict) or not event.get('type'):
        return jsonify({'status': 'error', 'message': 'Event must be an object with a type'}), 400

    manager = portfolio_content.manager
    try:
        state = manager.current(session_locale() or resolve_locale(None))
    except ContentLoadError as e:
        current_app.logger.error(f"Failed to load content for interaction: {str(e)}")
        return jsonify({'status': 'error'}), 503

    controller = load_controller(state)
    controller.locale = state.locale

    try:
        effects = controller.dispatch(event)
    except InteractionError as e:
        current_app.logger.warning(f"Rejected {event.get('type')} event: {str(e)}")
        return jsonify({'status': 'error', 'message': str(e)}), 400

    response = {}
    toggle = next((effect for effect in effects if effect.kind == 'toggle_locale'), None)
    if toggle is not None:
        try:
            state = manager.load(toggle.data['locale'])
        except ContentLoadError as e:
            current_app.logger.error(f"Failed to switch language: {str(e)}")
            effects.append(Effect('loading', {'active': False}))
        else:
            effects.extend(controller.locale_loaded(state.locale, state.images))
            response['sections'] = sections_payload(state)
            current_app.logger.info(f"Language switched to: {state.locale}")

    store_controller(controller)
    response['effects'] = [effect.to_dict() for effect in effects]
    response['state'] = controller.to_dict()
    return jsonify(response)
