import pytest

from renderlayout.exceptions import (
    ConfigurationError,
    PartialDiscoveryError,
    ProviderError,
    RenderLayoutException,
    UserFacingError,
)


@pytest.mark.parametrize('error', [
    RenderLayoutException(),
    ConfigurationError('bad option'),
    PartialDiscoveryError('templates/partials', 'No such file or directory'),
    ProviderError('query failed', data={'x': 1}),
    UserFacingError('shown', cause=ValueError('cause')),
])
def test_exceptions_carry_no_http_status(error):
    assert not hasattr(error, 'status_code')


def test_status_code_is_not_accepted():
    with pytest.raises(TypeError):
        ProviderError('query failed', None, 500)
    with pytest.raises(TypeError):
        UserFacingError('shown', None, None, 422)


def test_default_messages():
    assert RenderLayoutException().message == 'An error occurred'
    assert str(ProviderError()) == 'Data provider failed'
    assert ProviderError().data == {}


def test_partial_discovery_message():
    error = PartialDiscoveryError('templates/partials', 'No such file or directory')

    assert str(error) == 'Unable to read partials directory: templates/partials (No such file or directory)'
    assert error.directory == 'templates/partials'
