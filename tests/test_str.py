from zancommon.support import Str


def test_remove_prefix():
    assert Str.remove_prefix('setup_app', 'setup_') == 'app'
    assert Str.remove_prefix('app', 'setup_') == 'app'
    assert Str.remove_prefix('app', '') == 'app'


def test_remove_postfix():
    assert Str.remove_postfix('SomeProductBundle', 'Bundle') == 'SomeProduct'
    assert Str.remove_postfix('BundleProduct', 'Bundle') == 'BundleProduct'
    assert Str.remove_postfix(None, 'Bundle') is None
    assert Str.remove_postfix('Bundle', None) == 'Bundle'


def test_ends_with():
    assert Str.ends_with('SomeProductBundle', 'Bundle')
    assert Str.ends_with('report.csv', ['.txt', '.csv'])
    assert not Str.ends_with('', 'Bundle')
    assert not Str.ends_with('Bundle', '')
    assert not Str.ends_with(None, 'x')


def test_starts_with():
    assert Str.starts_with('Framework', 'Frame')
    assert Str.starts_with('Framework', ['x', 'Fr'])
    assert not Str.starts_with(None, 'Frame')


def test_starts_with_i():
    assert Str.starts_with_i('MySQL 8.0', 'mysql')
    assert not Str.starts_with_i('postgres', 'mysql')
    assert not Str.starts_with_i(None, 'mysql')
    assert not Str.starts_with_i('mysql', None)
