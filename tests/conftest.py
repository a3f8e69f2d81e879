import copy
import json

import pytest

from app import create_app


EN_DOCUMENT = {
    "meta": {"title": "Jane Doe - Game Developer"},
    "intro": {"name": "Jane Doe", "title": "Unity Developer", "location": "Berlin"},
    "about": {"title": "About", "content": "Games & tools.\nShipped <many> titles."},
    "projects": [
        {
            "title": "A",
            "techTags": ["Unity"],
            "description": "First project",
            "contribution": ["x", "y"],
            "image": "a",
            "links": [{"text": "Steam imagination", "url": "http://a", "icon": "steam"}]
        },
        {
            "title": "B",
            "description": "Second project",
            "contribution": "Everything",
            "image": "b",
            "imageThumb": "b-small",
            "imageExtension": "png",
            "links": []
        },
        {
            "title": "C",
            "description": "Third project",
            "image": "c",
            "links": []
        }
    ],
    "jams": [],
    "prototypes": [],
    "experience": [],
    "skills": [{"name": "Unity"}],
    "education": []
}

RU_DOCUMENT = {
    "meta": {"title": "Джейн Доу - Разработчик игр"},
    "intro": {"name": "Джейн Доу", "title": "Unity-разработчик", "location": "Берлин"},
    "about": {"title": "Обо мне", "content": "Игры и инструменты."},
    "projects": [
        {"title": "А", "description": "Первый проект", "image": "a", "links": []}
    ],
    "jams": [],
    "prototypes": [
        {"title": "Orbit", "status": "В разработке", "description": "Прототип"}
    ],
    "experience": [],
    "skills": [],
    "education": []
}

SOCIAL_DOCUMENT = {
    "social": [
        {"name": "GitHub", "icon": "fa-github", "url": "https://github.com/jane"},
        {"name": "CV", "icon": "fa-file-pdf", "url": "cv_en.pdf", "urls": {"ru": "cv_ru.pdf"}}
    ]
}


def write_document(content_dir, resource, payload):
    path = content_dir / resource
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(payload, str):
        path.write_text(payload, encoding='utf-8')
    else:
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding='utf-8')
    return path


@pytest.fixture
def en_document():
    return copy.deepcopy(EN_DOCUMENT)


@pytest.fixture
def ru_document():
    return copy.deepcopy(RU_DOCUMENT)


@pytest.fixture
def content_dir(tmp_path):
    write_document(tmp_path, 'data/portfolio.json', EN_DOCUMENT)
    write_document(tmp_path, 'data/portfolio_ru.json', RU_DOCUMENT)
    write_document(tmp_path, 'data/social.json', SOCIAL_DOCUMENT)
    return tmp_path


@pytest.fixture
def app(content_dir):
    return create_app('testing', CONTENT_DIR=str(content_dir))


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_context(app):
    with app.app_context():
        yield
