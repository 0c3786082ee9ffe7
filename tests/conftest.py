import os
from types import SimpleNamespace

import pytest

from renderlayout.support import EnvHelper

LAYOUT = (
    '<html>{{ partial("partials/header") }}'
    '<main>{{ content }}</main>'
    '{{ partial("partials/footer") }}</html>'
)


def write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding='utf-8')
    return path


@pytest.fixture
def templates_dir(tmp_path):
    """Template tree with one layout, two partials and a few views"""
    root = tmp_path / 'templates'
    write(root / 'layouts' / 'index.html', LAYOUT)
    write(root / 'layouts' / 'app.html', '<app>{{ content }}</app>')
    write(root / 'partials' / 'header.html', '<header>{{ app_name }}</header>')
    write(root / 'partials' / 'footer.html', '<footer>footer</footer>')
    write(root / 'partials' / 'notes.txt', 'not a partial')
    write(root / 'home.html', '<h1>Hello {{ hello }}</h1>')
    write(
        root / 'errors.html',
        '{% for error in errors %}<li>{{ error }}</li>{% endfor %}',
    )
    write(root / 'broken.html', '{{ missing_function() }}')
    return root


@pytest.fixture
def make_request():
    def factory(**attrs):
        attrs.setdefault('path', '/')
        return SimpleNamespace(**attrs)
    return factory


@pytest.fixture
def clean_env():
    """Drop RENDERLAYOUT_* variables and the loaded .env state after the test"""
    EnvHelper.reset()
    yield
    for key in [k for k in os.environ if k.startswith('RENDERLAYOUT_')]:
        del os.environ[key]
    EnvHelper.reset()
