import threading

import pytest
import requests

from models import AppState, ImageRef
from utils.content import (
    ContentLoadError,
    ContentSource,
    PortfolioManager,
    build_image_refs,
    content_resource,
    load_content,
)

from conftest import EN_DOCUMENT, RU_DOCUMENT, SOCIAL_DOCUMENT, write_document


pytestmark = pytest.mark.usefixtures('app_context')


class CountingSource:
    def __init__(self, inner):
        self.inner = inner
        self.calls = []

    def fetch(self, resource):
        self.calls.append(resource)
        return self.inner.fetch(resource)


class FakeResponse:
    def __init__(self, status_code=200, payload=None, error=None):
        self.status_code = status_code
        self.ok = 200 <= status_code < 300
        self._payload = payload
        self._error = error

    def json(self):
        if self._error is not None:
            raise self._error
        return self._payload


@pytest.fixture
def source(content_dir):
    return ContentSource(content_dir=str(content_dir))


def test_content_resource_names():
    assert content_resource('en') == 'data/portfolio.json'
    assert content_resource('ru') == 'data/portfolio_ru.json'


@pytest.mark.parametrize('locale, document', [('en', EN_DOCUMENT), ('ru', RU_DOCUMENT)])
def test_load_reads_title_of_each_locale(source, locale, document):
    state = load_content(AppState(locale='en'), locale, source)

    assert state.locale == locale
    assert state.document.title == document['meta']['title']
    assert len(state.social.social) == len(SOCIAL_DOCUMENT['social'])


def test_image_list_matches_projects(source):
    state = load_content(AppState(locale='en'), 'en', source)

    assert len(state.images) == len(state.document.projects)
    assert state.images[0] == ImageRef(full='images/fulls/a.jpg', thumb='images/thumbs/a.jpg',
                                       title='A', description='First project')
    assert state.images[1].thumb == 'images/thumbs/b-small.png'
    assert state.images[1].full == 'images/fulls/b.png'


def test_build_image_refs_of_empty_project_list():
    assert build_image_refs([]) == ()


def test_social_document_is_fetched_once(source):
    counting = CountingSource(source)

    first = load_content(AppState(locale='en'), 'en', counting)
    second = load_content(first, 'ru', counting)

    assert counting.calls.count('data/social.json') == 1
    assert second.social is first.social


def test_missing_translation_falls_back_to_default(content_dir, source):
    (content_dir / 'data' / 'portfolio_ru.json').unlink()

    state = load_content(AppState(locale='en'), 'ru', source)

    assert state.locale == 'en'
    assert state.document.title == EN_DOCUMENT['meta']['title']
    assert len(state.images) == len(EN_DOCUMENT['projects'])


def test_malformed_translation_falls_back_to_default(content_dir, source):
    write_document(content_dir, 'data/portfolio_ru.json', '{"meta": ')

    state = load_content(AppState(locale='en'), 'ru', source)

    assert state.locale == 'en'
    assert state.document.name == 'Jane Doe'


def test_translation_that_is_not_an_object_falls_back(content_dir, source):
    write_document(content_dir, 'data/portfolio_ru.json', '[1, 2, 3]')

    state = load_content(AppState(locale='en'), 'ru', source)

    assert state.locale == 'en'


def test_missing_social_document_leaves_locale_loaded(content_dir, source):
    (content_dir / 'data' / 'social.json').unlink()

    state = load_content(AppState(locale='en'), 'ru', source)

    assert state.locale == 'ru'
    assert state.document.title == RU_DOCUMENT['meta']['title']
    assert state.social is None


def test_malformed_social_document_is_retried_on_next_load(content_dir, source):
    write_document(content_dir, 'data/social.json', '[]')
    counting = CountingSource(source)

    first = load_content(AppState(locale='en'), 'en', counting)
    assert first.social is None

    write_document(content_dir, 'data/social.json', SOCIAL_DOCUMENT)
    second = load_content(first, 'ru', counting)

    assert counting.calls.count('data/social.json') == 2
    assert len(second.social.social) == len(SOCIAL_DOCUMENT['social'])


def test_default_locale_failure_propagates(content_dir, source):
    (content_dir / 'data' / 'portfolio.json').unlink()

    with pytest.raises(ContentLoadError) as excinfo:
        load_content(AppState(locale='en'), 'en', source)

    assert excinfo.value.resource == 'data/portfolio.json'
    assert excinfo.value.locale == 'en'


def test_translation_and_default_both_failing_propagates(content_dir, source):
    (content_dir / 'data' / 'portfolio.json').unlink()
    (content_dir / 'data' / 'portfolio_ru.json').unlink()

    with pytest.raises(ContentLoadError):
        load_content(AppState(locale='en'), 'ru', source)


def test_unconfigured_source_raises():
    with pytest.raises(ContentLoadError):
        ContentSource().fetch('data/portfolio.json')


def test_http_source_parses_json(monkeypatch):
    requested = []

    def fake_get(url, timeout):
        requested.append((url, timeout))
        return FakeResponse(payload={'social': []})

    monkeypatch.setattr(requests, 'get', fake_get)
    source = ContentSource(base_url='https://cdn.example.com/site', timeout=3)

    assert source.fetch('data/social.json') == {'social': []}
    assert requested == [('https://cdn.example.com/site/data/social.json', 3)]


@pytest.mark.parametrize('response', [
    FakeResponse(status_code=404),
    FakeResponse(status_code=500),
    FakeResponse(payload=None, error=ValueError('Expecting value')),
])
def test_http_source_failures_raise_content_error(monkeypatch, response):
    monkeypatch.setattr(requests, 'get', lambda url, timeout: response)
    source = ContentSource(base_url='https://cdn.example.com/')

    with pytest.raises(ContentLoadError):
        source.fetch('data/portfolio.json')


def test_http_transport_error_raises_content_error(monkeypatch):
    def fake_get(url, timeout):
        raise requests.ConnectionError('connection refused')

    monkeypatch.setattr(requests, 'get', fake_get)

    with pytest.raises(ContentLoadError):
        ContentSource(base_url='https://cdn.example.com/').fetch('data/portfolio.json')


def test_http_translation_failure_falls_back(monkeypatch):
    documents = {
        'https://cdn.example.com/data/portfolio.json': FakeResponse(payload=EN_DOCUMENT),
        'https://cdn.example.com/data/social.json': FakeResponse(payload=SOCIAL_DOCUMENT),
    }
    monkeypatch.setattr(requests, 'get', lambda url, timeout: documents.get(url, FakeResponse(status_code=404)))

    state = load_content(AppState(locale='en'), 'ru', ContentSource(base_url='https://cdn.example.com'))

    assert state.locale == 'en'
    assert state.document.title == EN_DOCUMENT['meta']['title']


def test_manager_commits_loaded_state(source):
    manager = PortfolioManager(source)

    state = manager.load('ru')

    assert manager.state is state
    assert state.token == 1
    assert manager.current('ru') is state
    assert manager.current('en').locale == 'en'
    assert manager.state.social is state.social


def test_manager_discards_stale_load(app, content_dir, source):
    entered = threading.Event()
    release = threading.Event()

    class GatedSource:
        def fetch(self, resource):
            if resource == 'data/portfolio_ru.json':
                entered.set()
                release.wait(5)
            return source.fetch(resource)

    manager = PortfolioManager(GatedSource())
    results = {}

    def slow_load():
        with app.app_context():
            results['ru'] = manager.load('ru')

    worker = threading.Thread(target=slow_load)
    worker.start()
    assert entered.wait(5)

    latest = manager.load('en')
    release.set()
    worker.join(5)

    assert results['ru'].locale == 'ru'
    assert results['ru'].token < latest.token
    assert manager.state.locale == 'en'
    assert manager.state.document.title == EN_DOCUMENT['meta']['title']


def test_manager_reset(source):
    manager = PortfolioManager(source)
    manager.load('en')
    manager.reset()

    assert manager.state.document is None
    assert manager.state.social is None
