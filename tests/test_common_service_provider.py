import pytest

from zancommon import request_parameters
from zancommon.providers import CommonServiceProvider
from zancommon.support import Config


class FakeApp:
    def __init__(self):
        self.middleware = []

    def register_middleware(self, middleware, attach_to='request'):
        self.middleware.append((middleware, attach_to))


def test_register_sets_defaults_without_overriding():
    Config.set('common.QUERY_PARAMETERS_CTX_KEY', 'qp')

    CommonServiceProvider(FakeApp()).register()

    assert Config.get('common.QUERY_PARAMETERS_CTX_KEY') == 'qp'
    assert Config.get('common.QUERY_PARAMETERS_ENABLED') is True


@pytest.mark.asyncio
async def test_install_attaches_request_middleware(make_request):
    app = FakeApp()

    CommonServiceProvider.install(app)

    assert len(app.middleware) == 1
    handler, attach_to = app.middleware[0]
    assert attach_to == 'request'

    request = make_request('id=1&id=2')
    assert await handler(request) is None
    assert request.ctx.query_parameters == {'id': ['1', '2']}
    assert request_parameters(request) == {'id': ['1', '2']}


def test_install_skips_disabled_middleware():
    Config.set('common.QUERY_PARAMETERS_ENABLED', False)
    app = FakeApp()

    CommonServiceProvider.install(app)

    assert app.middleware == []


def test_request_parameters_without_middleware(make_request):
    assert request_parameters(make_request('a=1&a=2')) == {'a': ['1', '2']}
