"""
Blueprints Package - Modular application structure
Each blueprint handles a specific part of the site
"""

__all__ = ['portfolio', 'api']
