import dataclasses

import pytest

from renderlayout import config as rl
from renderlayout.config import RendererConfig
from renderlayout.exceptions import ConfigurationError


def test_defaults():
    config = RendererConfig.resolve()

    assert config.templates_path == 'templates'
    assert config.partials_path == 'partials'
    assert config.layouts_path == 'layouts'
    assert config.layout == 'index'
    assert config.extension == '.html'
    assert config.delimiters == ('{{', '}}')
    assert config.error_key == 'errors'
    assert config.render_error == 'Something went wrong.'
    assert config.disable_cache is False
    assert config.debug is False
    assert config.default_data is None
    assert config.merge_strategy == 'accumulate'
    assert dict(config.funcs) == {}


def test_derived_paths():
    config = RendererConfig.resolve([rl.templates_path('views'), rl.layout('app')])

    assert config.partials_dir == 'views/partials'
    assert config.master == 'layouts/app'
    assert config.template_name('home') == 'home.html'


def test_last_write_wins():
    first = RendererConfig.resolve([rl.extension('tmpl'), rl.extension('htm')])
    swapped = RendererConfig.resolve([rl.extension('htm'), rl.extension('tmpl')])

    assert first.extension == '.htm'
    assert swapped.extension == '.tmpl'


def test_last_write_wins_for_functions():
    def one(value):
        return 1

    def two(value):
        return 2

    config = RendererConfig.resolve([rl.add_funcs({'one': one}), rl.add_funcs({'two': two})])

    assert dict(config.funcs) == {'two': two}


@pytest.mark.parametrize('value', ['html', '.html'])
def test_extension_gets_leading_dot(value):
    assert RendererConfig.resolve([rl.extension(value)]).extension == '.html'


def test_mapping_overrides():
    config = RendererConfig.resolve({'layout': 'app', 'debug': 1})

    assert config.layout == 'app'
    assert config.debug is True


def test_overwrite_strategy_uses_singular_error_key():
    assert RendererConfig.resolve([rl.merge_strategy('overwrite')]).error_key == 'error'


def test_explicit_error_key_is_kept():
    config = RendererConfig.resolve([rl.error_key('problems'), rl.merge_strategy('overwrite')])

    assert config.error_key == 'problems'


def test_delimiters():
    assert RendererConfig.resolve([rl.delimiters('[[', ']]')]).delimiters == ('[[', ']]')


@pytest.mark.parametrize('overrides', [
    [('extention', '.html')],
    [('layout',)],
    [rl.merge_strategy('append')],
    [rl.delimiters('', '}}')],
    [rl.add_funcs({'upper': 'not callable'})],
    [rl.default_data({'not': 'callable'})],
])
def test_invalid_overrides(overrides):
    with pytest.raises(ConfigurationError):
        RendererConfig.resolve(overrides)


def test_config_is_frozen():
    config = RendererConfig.resolve([rl.add_funcs({'one': lambda v: 1})])

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.layout = 'other'
    with pytest.raises(TypeError):
        config.funcs['two'] = lambda v: 2


def test_from_env(monkeypatch, clean_env):
    monkeypatch.setenv('RENDERLAYOUT_LAYOUT', 'app')
    monkeypatch.setenv('RENDERLAYOUT_EXTENSION', 'tmpl')
    monkeypatch.setenv('RENDERLAYOUT_DISABLE_CACHE', 'yes')
    monkeypatch.setenv('RENDERLAYOUT_LEFT_DELIMITER', '[[')

    config = RendererConfig.from_env([rl.layout('override')])

    assert config.layout == 'override'
    assert config.extension == '.tmpl'
    assert config.disable_cache is True
    assert config.delimiters == ('[[', '}}')


def test_from_env_file(tmp_path, clean_env):
    env_file = tmp_path / '.env'
    env_file.write_text('RENDERLAYOUT_TEMPLATES_PATH=views\nRENDERLAYOUT_DEBUG=off\n')

    config = RendererConfig.from_env(env_path=env_file)

    assert config.templates_path == 'views'
    assert config.debug is False


def test_direct_construction_resolves_error_key():
    assert RendererConfig().error_key == 'errors'
    assert RendererConfig(merge_strategy='overwrite').error_key == 'error'
    assert RendererConfig(error_key='problems').error_key == 'problems'
