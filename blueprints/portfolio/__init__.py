"""
Portfolio Blueprint - The public portfolio page
Handles: Locale resolution, section rendering, lightbox/drawer state
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='')

from . import routes
