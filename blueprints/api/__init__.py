"""
API Blueprint - JSON endpoints used by the page without reloading
Handles: Re-rendering sections for a locale, interaction events
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from . import routes
