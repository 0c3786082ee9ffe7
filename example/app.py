"""
Example application
Two renderers with different layouts mounted on Sanic routes

    cd example && sanic app:app --dev
"""
from sanic import Sanic

import renderlayout as rl
from renderlayout.logging import LoggerConfig

LoggerConfig.setup_logger('renderlayout', format_type='text', environment='development')


def app_defaults(request):
    return {'app_name': 'renderlayout'}


def home_data(request):
    return {'hello': 'world'}


def dashboard_data(request):
    raise rl.UserFacingError(
        'error in dashboard',
        cause=ValueError('a wrapped error which is shown to the user'),
        data={'dashboard': 'dashboard'},
    )


index_layout = rl.new(
    rl.layout('index'),
    rl.disable_cache(True),
    rl.default_data(app_defaults),
)

app_layout = rl.new(
    rl.layout('app'),
    rl.disable_cache(True),
    rl.default_data(app_defaults),
)

app = Sanic('renderlayout_example')
app.add_route(index_layout('home', home_data), '/')
app.add_route(app_layout('dashboard', dashboard_data), '/app')
