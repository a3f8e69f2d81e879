"""
Localization Module - Locale resolution and the bilingual label table
"""

from urllib.parse import urlsplit, parse_qs


SUPPORTED_LOCALES = ('en', 'ru')
DEFAULT_LOCALE = 'en'
LOCALE_PARAM = 'lang'

LABEL_KEYS = (
    'portfolio',
    'contact',
    'projects_title',
    'jams_title',
    'prototypes_title',
    'experience_title',
    'skills_title',
    'education_title',
    'contribution',
    'nav_title',
    'nav_about',
    'nav_projects',
    'nav_jams',
    'nav_prototypes',
    'nav_experience',
    'nav_skills',
    'nav_education',
    'nav_contact',
    'toggle',
)

LABELS = {
    'en': {
        'portfolio': 'Portfolio',
        'contact': 'Contact',
        'projects_title': 'Games Portfolio',
        'jams_title': 'Jams',
        'prototypes_title': 'Prototypes',
        'experience_title': 'Experience',
        'skills_title': 'Skills',
        'education_title': 'Education',
        'contribution': 'my contribution:',
        'nav_title': 'Navigation',
        'nav_about': 'About',
        'nav_projects': 'Projects',
        'nav_jams': 'Jams',
        'nav_prototypes': 'Prototypes',
        'nav_experience': 'Experience',
        'nav_skills': 'Skills',
        'nav_education': 'Education',
        'nav_contact': 'Contact',
        'toggle': 'RU',
    },
    'ru': {
        'portfolio': 'Портфолио',
        'contact': 'Контакты',
        'projects_title': 'Портфолио игр',
        'jams_title': 'Джемы',
        'prototypes_title': 'Прототипы',
        'experience_title': 'Опыт работы',
        'skills_title': 'Навыки',
        'education_title': 'Образование',
        'contribution': 'мой вклад:',
        'nav_title': 'Навигация',
        'nav_about': 'Обо мне',
        'nav_projects': 'Проекты',
        'nav_jams': 'Джемы',
        'nav_prototypes': 'Прототипы',
        'nav_experience': 'Опыт',
        'nav_skills': 'Навыки',
        'nav_education': 'Образование',
        'nav_contact': 'Контакты',
        'toggle': 'EN',
    },
}


class LocalizationError(Exception):
    """Raised when the label table is incomplete for a supported locale"""


def validate_labels(labels=None, locales=SUPPORTED_LOCALES):
    """
    Ensure every supported locale defines every label key

    Args:
        labels (dict, optional): Table to check, defaults to LABELS
        locales (tuple): Locales that must be present

    Raises:
        LocalizationError: listing each locale and the keys it is missing
    """
    labels = LABELS if labels is None else labels
    problems = []
    for locale in locales:
        record = labels.get(locale)
        if record is None:
            problems.append(f'{locale}: no labels')
            continue
        missing = [key for key in LABEL_KEYS if key not in record]
        if missing:
            problems.append(f"{locale}: missing {', '.join(missing)}")
    if problems:
        raise LocalizationError('Incomplete label table - ' + '; '.join(problems))


def resolve_locale(value):
    """Return value if it is a supported locale, otherwise the default"""
    if value in SUPPORTED_LOCALES:
        return value
    return DEFAULT_LOCALE


def resolve_locale_from_url(url):
    """Resolve the locale from the ``lang`` query parameter of a URL"""
    values = parse_qs(urlsplit(url).query).get(LOCALE_PARAM)
    return resolve_locale(values[0] if values else None)


def next_locale(locale):
    """Locale the language toggle switches to"""
    locale = resolve_locale(locale)
    index = SUPPORTED_LOCALES.index(locale)
    return SUPPORTED_LOCALES[(index + 1) % len(SUPPORTED_LOCALES)]


def get_labels(locale):
    return LABELS.get(locale) or LABELS[DEFAULT_LOCALE]


def get_label(locale, key):
    return get_labels(locale)[key]


__all__ = [
    'SUPPORTED_LOCALES',
    'DEFAULT_LOCALE',
    'LOCALE_PARAM',
    'LABEL_KEYS',
    'LABELS',
    'LocalizationError',
    'validate_labels',
    'resolve_locale',
    'resolve_locale_from_url',
    'next_locale',
    'get_labels',
    'get_label'
]
