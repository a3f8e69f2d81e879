"""
Renderers Module - Section renderers for the portfolio page
Each renderer is a pure function of a content slice and a locale that returns
a Fragment: markup keyed by the id of the mount point it belongs in.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape

from .helpers import format_about
from .icons import get_link_icon, get_social_icon, get_skill_category
from .localization import get_labels


SECTION_TEMPLATES = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
                                 'templates', 'sections')

MOUNT_POINTS = frozenset({
    'hero-name', 'hero-title', 'hero-location', 'nav-title',
    'contact-title', 'social-links',
    'about-title', 'about-content',
    'projects-title', 'projects-grid',
    'jams-title', 'jams-grid',
    'prototypes-title', 'prototypes-grid',
    'experience-title', 'experience-list',
    'skills-title', 'skills-grid',
    'education-title', 'education-list',
    'mobile-nav-title', 'nav-about', 'nav-projects', 'nav-jams', 'nav-prototypes',
    'nav-experience', 'nav-skills', 'nav-education', 'nav-contact',
    'language-toggle',
})

_env = Environment(
    loader=FileSystemLoader(SECTION_TEMPLATES),
    autoescape=select_autoescape(['html']),
    trim_blocks=True,
    lstrip_blocks=True
)
_env.globals.update(link_icon=get_link_icon, social_icon=get_social_icon)


@dataclass
class Fragment:
    mounts: Dict[str, Markup] = field(default_factory=dict)
    visibility: Dict[str, bool] = field(default_factory=dict)
    title: Optional[str] = None


@dataclass
class RenderedPage:
    locale: str
    title: str = ''
    mounts: Dict[str, Markup] = field(default_factory=dict)
    visibility: Dict[str, bool] = field(default_factory=dict)

    def mount(self, mount_id):
        return self.mounts.get(mount_id, Markup(''))

    def is_visible(self, section_id):
        return self.visibility.get(section_id, True)

    def to_dict(self):
        return {
            'locale': self.locale,
            'title': self.title,
            'mounts': {k: str(v) for k, v in self.mounts.items()},
            'visibility': dict(self.visibility)
        }


def _text(value):
    return escape(value or '')


def _render(template_name, **context):
    return Markup(_env.get_template(template_name).render(**context).strip())


def render_hero(document, locale):
    labels = get_labels(locale)
    return Fragment(
        mounts={
            'hero-name': _text(document.name),
            'hero-title': _text(document.headline),
            'hero-location': _text(document.location),
            'nav-title': _text(f"{document.name} - {labels['portfolio']}"),
        },
        title=document.title
    )


def render_social(social, locale):
    fragment = Fragment(mounts={'contact-title': _text(get_labels(locale)['contact'])})
    if social is None:
        return fragment

    fragment.mounts['social-links'] = _render('social.html', links=social.social, locale=locale)
    return fragment


def render_about(document, locale):
    return Fragment(mounts={
        'about-title': _text(document.about_title),
        'about-content': format_about(document.about_content),
    })


def render_projects(document, locale):
    labels = get_labels(locale)
    return Fragment(mounts={
        'projects-title': _text(labels['projects_title']),
        'projects-grid': _render('projects.html', projects=document.projects, labels=labels),
    })


def render_jams(document, locale):
    labels = get_labels(locale)
    fragment = Fragment(mounts={'jams-title': _text(labels['jams_title'])})
    if document.jams is None:
        return fragment

    fragment.mounts['jams-grid'] = _render('jams.html', jams=document.jams, labels=labels)
    return fragment


def render_prototypes(document, locale):
    """Prototypes are the one section hidden entirely when the list is empty"""
    labels = get_labels(locale)
    fragment = Fragment(mounts={'prototypes-title': _text(labels['prototypes_title'])})
    if document.prototypes is None:
        return fragment

    if not document.prototypes:
        fragment.visibility['prototypes'] = False
        return fragment

    fragment.visibility['prototypes'] = True
    fragment.mounts['prototypes-grid'] = _render('prototypes.html', prototypes=document.prototypes, labels=labels)
    return fragment


def render_experience(document, locale):
    fragment = Fragment(mounts={'experience-title': _text(get_labels(locale)['experience_title'])})
    if document.experience is None:
        return fragment

    fragment.mounts['experience-list'] = _render('experience.html', experience=document.experience)
    return fragment


def render_skills(document, locale):
    fragment = Fragment(mounts={'skills-title': _text(get_labels(locale)['skills_title'])})
    if document.skills is None:
        return fragment

    skills = [(skill, get_skill_category(skill)) for skill in document.skills]
    fragment.mounts['skills-grid'] = _render('skills.html', skills=skills)
    return fragment


def render_education(document, locale):
    fragment = Fragment(mounts={'education-title': _text(get_labels(locale)['education_title'])})
    if document.education is None:
        return fragment

    fragment.mounts['education-list'] = _render('education.html', education=document.education)
    return fragment


def render_nav_labels(locale):
    """Mobile drawer labels and the language toggle caption"""
    labels = get_labels(locale)
    mounts = {'mobile-nav-title': _text(labels['nav_title']),
              'language-toggle': _text(labels['toggle'])}
    for section in ('about', 'projects', 'jams', 'prototypes', 'experience', 'skills', 'education', 'contact'):
        mounts[f'nav-{section}'] = _text(labels[f'nav_{section}'])
    return Fragment(mounts=mounts)


DOCUMENT_RENDERERS = (
    render_hero,
    render_about,
    render_projects,
    render_jams,
    render_prototypes,
    render_experience,
    render_skills,
    render_education,
)


def render_all_sections(state, mount_points=MOUNT_POINTS):
    """
    Render every section of a loaded state into one page

    Fragments aimed at mount points missing from ``mount_points`` are
    dropped, so a page without a section simply does not get it.

    Args:
        state (AppState): A state with a loaded document
        mount_points (iterable): Ids present in the page layout

    Returns:
        RenderedPage
    """
    fragments: List[Fragment] = [renderer(state.document, state.locale) for renderer in DOCUMENT_RENDERERS]
    fragments.insert(1, render_social(state.social, state.locale))
    fragments.append(render_nav_labels(state.locale))

    page = RenderedPage(locale=state.locale)
    for fragment in fragments:
        if fragment.title is not None:
            page.title = fragment.title
        page.visibility.update(fragment.visibility)
        for mount_id, markup in fragment.mounts.items():
            if mount_id in mount_points:
                page.mounts[mount_id] = markup
    return page


__all__ = [
    'MOUNT_POINTS',
    'Fragment',
    'RenderedPage',
    'render_hero',
    'render_social',
    'render_about',
    'render_projects',
    'render_jams',
    'render_prototypes',
    'render_experience',
    'render_skills',
    'render_education',
    'render_nav_labels',
    'render_all_sections'
]
