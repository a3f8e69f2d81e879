"""
Models Module - Portfolio content data model
Plain dataclasses built from the static JSON documents. Every ``from_dict``
tolerates omitted optional fields and ignores fields it does not know.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union


Contribution = Union[str, List[str], None]


class ContentFormatError(ValueError):
    """Raised when a content document does not have the expected shape"""


def _as_list(value):
    if isinstance(value, list):
        return value
    return []


def _as_dict(value):
    if isinstance(value, dict):
        return value
    return {}


@dataclass(frozen=True)
class ImageRef:
    full: str
    thumb: str
    title: str
    description: str

    def to_dict(self):
        return {
            'full': self.full,
            'thumb': self.thumb,
            'title': self.title,
            'description': self.description
        }


@dataclass
class Link:
    text: str = ''
    url: str = ''
    icon: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = _as_dict(data)
        return cls(text=data.get('text', ''), url=data.get('url', ''), icon=data.get('icon'))


@dataclass
class ShowcaseEntry:
    """Fields shared by projects, jams and prototypes"""

    DEFAULT_EXTENSION = 'png'

    title: str = ''
    description: str = ''
    genre: Optional[str] = None
    tech_tags: List[str] = field(default_factory=list)
    contribution: Contribution = None
    links: List[Link] = field(default_factory=list)
    image: Optional[str] = None
    image_thumb: Optional[str] = None
    image_full: Optional[str] = None
    image_extension: Optional[str] = None

    @classmethod
    def _common_fields(cls, data):
        contribution = data.get('contribution')
        if not isinstance(contribution, (str, list)):
            contribution = None
        return {
            'title': data.get('title', ''),
            'description': data.get('description', ''),
            'genre': data.get('genre'),
            'tech_tags': [str(tag) for tag in _as_list(data.get('techTags'))],
            'contribution': contribution,
            'links': [Link.from_dict(link) for link in _as_list(data.get('links'))],
            'image': data.get('image'),
            'image_thumb': data.get('imageThumb'),
            'image_full': data.get('imageFull'),
            'image_extension': data.get('imageExtension'),
        }

    @classmethod
    def from_dict(cls, data):
        return cls(**cls._common_fields(_as_dict(data)))

    @property
    def extension(self):
        return self.image_extension or self.DEFAULT_EXTENSION

    @property
    def has_image(self):
        return bool(self.image or self.image_thumb)

    @property
    def has_contribution(self):
        return bool(self.contribution)

    @property
    def thumb_path(self):
        return f"images/thumbs/{self.image_thumb or self.image or ''}.{self.extension}"

    @property
    def full_path(self):
        return f"images/fulls/{self.image_full or self.image or ''}.{self.extension}"


@dataclass
class ProjectEntry(ShowcaseEntry):
    DEFAULT_EXTENSION = 'jpg'

    role: Optional[str] = None
    featured: bool = False

    @classmethod
    def from_dict(cls, data):
        data = _as_dict(data)
        return cls(role=data.get('role'), featured=bool(data.get('featured', False)),
                   **cls._common_fields(data))

    def image_ref(self):
        return ImageRef(full=self.full_path, thumb=self.thumb_path,
                        title=self.title, description=self.description)


@dataclass
class JamEntry(ShowcaseEntry):
    event: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = _as_dict(data)
        return cls(event=data.get('event'), **cls._common_fields(data))


@dataclass
class PrototypeEntry(ShowcaseEntry):
    status: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = _as_dict(data)
        return cls(status=data.get('status'), **cls._common_fields(data))


@dataclass
class ExperienceEntry:
    company: str = ''
    title: str = ''
    period: str = ''
    description: str = ''
    url: Optional[str] = None
    location: Optional[str] = None
    achievements: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        data = _as_dict(data)
        return cls(
            company=data.get('company', ''),
            title=data.get('title', ''),
            period=data.get('period', ''),
            description=data.get('description', ''),
            url=data.get('url'),
            location=data.get('location'),
            achievements=[str(a) for a in _as_list(data.get('achievements'))]
        )


@dataclass
class EducationEntry:
    institution: str = ''
    degree: str = ''
    period: str = ''
    url: Optional[str] = None
    location: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = _as_dict(data)
        return cls(
            institution=data.get('institution', ''),
            degree=data.get('degree', ''),
            period=data.get('period', ''),
            url=data.get('url'),
            location=data.get('location')
        )


@dataclass
class SkillEntry:
    name: str = ''
    category: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        # Skills may be listed as bare names
        if isinstance(data, str):
            return cls(name=data)
        data = _as_dict(data)
        return cls(name=data.get('name', ''), category=data.get('category'))


def _optional_entries(data, key, entry_cls):
    """Absent section -> None, present section -> list of entries"""
    if key not in data or data[key] is None:
        return None
    return [entry_cls.from_dict(item) for item in _as_list(data[key])]


@dataclass
class PortfolioDocument:
    title: str = ''
    name: str = ''
    headline: str = ''
    location: Optional[str] = None
    about_title: str = ''
    about_content: str = ''
    projects: List[ProjectEntry] = field(default_factory=list)
    jams: Optional[List[JamEntry]] = None
    prototypes: Optional[List[PrototypeEntry]] = None
    experience: Optional[List[ExperienceEntry]] = None
    skills: Optional[List[SkillEntry]] = None
    education: Optional[List[EducationEntry]] = None

    @classmethod
    def from_dict(cls, data):
        """
        Build a document from the parsed locale JSON

        Raises:
            ContentFormatError: if the root value is not a JSON object
        """
        if not isinstance(data, dict):
            raise ContentFormatError(f'Portfolio document must be an object, got {type(data).__name__}')

        meta = _as_dict(data.get('meta'))
        intro = _as_dict(data.get('intro'))
        about = _as_dict(data.get('about'))

        return cls(
            title=meta.get('title', ''),
            name=intro.get('name', ''),
            headline=intro.get('title', ''),
            location=intro.get('location'),
            about_title=about.get('title', ''),
            about_content=about.get('content', '') or '',
            projects=[ProjectEntry.from_dict(p) for p in _as_list(data.get('projects'))],
            jams=_optional_entries(data, 'jams', JamEntry),
            prototypes=_optional_entries(data, 'prototypes', PrototypeEntry),
            experience=_optional_entries(data, 'experience', ExperienceEntry),
            skills=_optional_entries(data, 'skills', SkillEntry),
            education=_optional_entries(data, 'education', EducationEntry)
        )


@dataclass
class SocialLink:
    name: str = ''
    icon: str = ''
    url: str = ''
    urls: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data):
        data = _as_dict(data)
        return cls(
            name=data.get('name', ''),
            icon=data.get('icon', ''),
            url=data.get('url', ''),
            urls=_as_dict(data.get('urls'))
        )

    def url_for(self, locale):
        """Locale-specific override (e.g. a translated CV) or the shared URL"""
        return self.urls.get(locale) or self.url


@dataclass
class SocialDocument:
    social: List[SocialLink] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ContentFormatError(f'Social document must be an object, got {type(data).__name__}')
        return cls(social=[SocialLink.from_dict(s) for s in _as_list(data.get('social'))])


@dataclass(frozen=True)
class AppState:
    """Everything one load cycle produced; replaced wholesale on every load"""

    locale: str
    document: Optional[PortfolioDocument] = None
    social: Optional[SocialDocument] = None
    images: Tuple[ImageRef, ...] = ()
    token: int = 0


__all__ = [
    'ContentFormatError',
    'ImageRef',
    'Link',
    'ShowcaseEntry',
    'ProjectEntry',
    'JamEntry',
    'PrototypeEntry',
    'ExperienceEntry',
    'EducationEntry',
    'SkillEntry',
    'PortfolioDocument',
    'SocialLink',
    'SocialDocument',
    'AppState'
]
