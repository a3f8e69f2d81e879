"""
Extensions Module - Centralized initialization of application-wide services
Decouples the content manager from the main app.py to avoid circular imports
and enable better testing.
"""

from flask import current_app

from utils.content import ContentSource, PortfolioManager


class PortfolioContent:
    """Binds one PortfolioManager to each application"""

    extension_name = 'portfolio_content'

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        source = ContentSource.from_config(app.config)
        app.extensions[self.extension_name] = PortfolioManager(source)

    @property
    def manager(self):
        return current_app.extensions[self.extension_name]


# Initialize extensions without binding to app
portfolio_content = PortfolioContent()

__all__ = ['portfolio_content']
