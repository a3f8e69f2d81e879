"""
Icons Module - Icon and skill-category lookup tables
Maps link, social and skill keys to Font Awesome classes and categories
"""

DEFAULT_LINK_ICON = 'fas fa-external-link-alt'
DEFAULT_SOCIAL_ICON = 'fas fa-link'
DEFAULT_SKILL_CATEGORY = 'engine'

# Keys are lowercase; link lookups are case-insensitive
LINK_ICONS = {
    'steam': 'fab fa-steam',
    'youtube': 'fab fa-youtube',
    'globe': 'fas fa-globe',
    'website': 'fas fa-globe',
    'официальный сайт': 'fas fa-globe',
    'official site': 'fas fa-globe',
    'official website': 'fas fa-globe',
    'github': 'fab fa-github',
    'play store': 'fab fa-google-play',
    'google play': 'fab fa-google-play',
    'google-play': 'fab fa-google-play',
    'app store': 'fab fa-apple',
    'apple': 'fab fa-apple',
    'itch.io': 'fab fa-itch-io',
    'discord': 'fab fa-discord'
}

# Social lookups are case-sensitive
SOCIAL_ICONS = {
    'fa-linkedin': 'fab fa-linkedin',
    'fa-github': 'fab fa-github',
    'fa-gamepad': 'fas fa-gamepad',
    'fa-app-store': 'fab fa-app-store',
    'fa-google-play': 'fab fa-google-play',
    'fa-itch-io': 'fab fa-itch-io',
    'fa-file-code': 'fas fa-file-code',
    'fa-envelope': 'fas fa-envelope',
    'fa-file-pdf': 'fas fa-file-alt'
}

SKILL_CATEGORIES = {
    # Engine/Core
    'Unity': 'engine',
    'Unreal Engine': 'engine',
    'C#': 'engine',
    'C++': 'engine',
    'DOTS': 'engine',
    'ECS': 'engine',
    'ECS (Entities)': 'engine',
    'Addressables': 'engine',

    # Async/Reactive
    'UniTask': 'async',
    'R3 (UniRx)': 'async',
    'Extenject': 'async',
    'Zenject': 'async',

    # Architecture
    'MVC/MVP/MVVM': 'architecture',
    'CPU/GPU/RAM optimisation': 'architecture',
    'AI-Enhanced Workflow Cursor + MCP': 'architecture',

    # Network
    'TypeScript': 'network',
    'Multiplayer': 'network',
    'Client Networking': 'network',
    'Netcode optimisation': 'network',
    'Networking': 'network',
    'Firebase': 'network',

    # Tools/DevOps
    'CI/CD': 'tools',
    'Git': 'tools',
    'JavaScript': 'tools',
    'Python': 'tools'
}


def get_link_icon(link):
    """
    Resolve the icon class for a project link

    Args:
        link (Link): Link whose ``icon`` (or, failing that, ``text``) is the key

    Returns:
        str: Font Awesome class, external-link icon when nothing matches
    """
    key = (link.icon or link.text or '').lower()
    return LINK_ICONS.get(key, DEFAULT_LINK_ICON)


def get_social_icon(icon_name):
    """Resolve a social icon key (exact match only)"""
    return SOCIAL_ICONS.get(icon_name, DEFAULT_SOCIAL_ICON)


def get_skill_category(skill):
    """Explicit category, else the table entry for the skill name"""
    return skill.category or SKILL_CATEGORIES.get(skill.name, DEFAULT_SKILL_CATEGORY)


__all__ = [
    'DEFAULT_LINK_ICON',
    'DEFAULT_SOCIAL_ICON',
    'DEFAULT_SKILL_CATEGORY',
    'LINK_ICONS',
    'SOCIAL_ICONS',
    'SKILL_CATEGORIES',
    'get_link_icon',
    'get_social_icon',
    'get_skill_category'
]
