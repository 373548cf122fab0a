import pytest

from zancommon.middleware import QueryParametersMiddleware
from zancommon.support import Config


@pytest.mark.asyncio
async def test_before_request_stores_parameters_on_ctx(make_request):
    request = make_request('tag=a&tag=b&page=2')

    result = await QueryParametersMiddleware().before_request(request)

    assert result is None
    assert request.ctx.query_parameters == {'tag': ['a', 'b'], 'page': '2'}


@pytest.mark.asyncio
async def test_empty_query_string_stores_empty_dict(make_request):
    request = make_request('')

    await QueryParametersMiddleware().before_request(request)

    assert request.ctx.query_parameters == {}


@pytest.mark.asyncio
async def test_after_response_returns_response_unchanged(make_request):
    response = object()

    assert await QueryParametersMiddleware().after_response(make_request(), response) is response


def test_register_middleware_uses_config():
    Config.set('common.QUERY_PARAMETERS_CTX_KEY', 'params')

    middleware = QueryParametersMiddleware._register_middleware()

    assert middleware.ctx_key == 'params'


def test_register_middleware_disabled():
    Config.set('common.QUERY_PARAMETERS_ENABLED', False)

    assert QueryParametersMiddleware._register_middleware() is None
