from zancommon import escape_like, query_parameters


def test_query_parameters():
    assert query_parameters('tag=a&tag=b&page=2') == {'tag': ['a', 'b'], 'page': '2'}
    assert query_parameters(None) == {}


def test_escape_like():
    assert escape_like('a_b') == '%a\\_b%'
