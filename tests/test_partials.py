import pytest

from renderlayout import new
from renderlayout.config import RendererConfig, extension, partials_path, templates_path
from renderlayout.exceptions import PartialDiscoveryError
from renderlayout.view.partials import discover_partials
from tests.conftest import write


def test_discovers_partials_in_listing_order(templates_dir):
    config = RendererConfig.resolve([templates_path(str(templates_dir))])

    partials = discover_partials(config)

    listed = [
        f"partials/{entry.name[:-len('.html')]}"
        for entry in (templates_dir / 'partials').iterdir()
        if entry.name.endswith('.html')
    ]
    assert set(partials) == {'partials/header', 'partials/footer'}
    assert list(partials) == listed


def test_custom_extension_and_directory(templates_dir):
    write(templates_dir / 'shared' / 'nav.tmpl', '<nav></nav>')
    write(templates_dir / 'shared' / 'nav.html', '<nav></nav>')
    config = RendererConfig.resolve([
        templates_path(str(templates_dir)),
        partials_path('shared'),
        extension('tmpl'),
    ])

    assert discover_partials(config) == ('shared/nav',)


def test_empty_directory(tmp_path):
    (tmp_path / 'partials').mkdir()
    config = RendererConfig.resolve([templates_path(str(tmp_path))])

    assert discover_partials(config) == ()


def test_missing_directory_fails(tmp_path):
    config = RendererConfig.resolve([templates_path(str(tmp_path / 'nowhere'))])

    with pytest.raises(PartialDiscoveryError) as excinfo:
        discover_partials(config)

    assert isinstance(excinfo.value.__cause__, OSError)
    assert 'nowhere' in str(excinfo.value)


def test_renderer_construction_fails_without_partials(tmp_path):
    with pytest.raises(PartialDiscoveryError):
        new(templates_path(str(tmp_path)))
