"""
Portfolio Site - Main Application Entry Point
Application Factory Pattern

This module initializes the Flask application with its configuration,
content manager and middleware. All actual route handling is delegated to
blueprints.
"""

import os
from datetime import datetime
from flask import Flask, render_template
from config import get_config
from extensions import portfolio_content
from utils.localization import validate_labels, SUPPORTED_LOCALES, DEFAULT_LOCALE

# Import all blueprints
from blueprints.portfolio import portfolio_bp
from blueprints.api import api_bp


def create_app(config_name=None, **overrides):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        **overrides: Config keys applied on top of the selected configuration

    Returns:
        Flask: Configured Flask application instance
    """

    # Static files (data/, images/) are served from the site root
    app = Flask(__name__, static_url_path='')

    # Load configuration
    app.config.from_object(get_config(config_name))
    app.config.update(overrides)
    app.json.ensure_ascii = False
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Fail early on an incomplete label table
    validate_labels()
    app.logger.info(f"✓ Labels validated for locales: {', '.join(SUPPORTED_LOCALES)}")

    # Initialize extensions with app
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio site is running'}, 200

    return app


def initialize_extensions(app):
    """Initialize extensions with the app instance"""
    portfolio_content.init_app(app)
    source = app.config.get('CONTENT_BASE_URL') or app.config.get('CONTENT_DIR')
    app.logger.info(f"✓ Content source: {source}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(portfolio_bp)
    app.register_blueprint(api_bp)


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('404.html'), 404

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return render_template('500.html'), 500

    @app.errorhandler(503)
    def service_unavailable(e):
        return render_template('503.html'), 503


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        return {
            'current_year': datetime.now().year,
            'supported_locales': SUPPORTED_LOCALES,
            'default_locale': DEFAULT_LOCALE
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "style-src 'self' 'unsafe-inline' https://cdnjs.cloudflare.com; "
            "font-src 'self' https://cdnjs.cloudflare.com; "
            "img-src 'self' data:; "
            "frame-ancestors 'none';"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        return response


# Create app instance for gunicorn
app = create_app()

if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=5000,
        debug=(env == 'development')
    )
