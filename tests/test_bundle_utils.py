from zancommon.support import BundleUtils


def test_dotted_path():
    assert BundleUtils.get_bundle_name('corp.SomeProductBundle.models.Order') == 'SomeProduct'


def test_backslash_path():
    assert BundleUtils.get_bundle_name('Corp\\SomeProductBundle\\Entity\\Order') == 'SomeProduct'


def test_snake_case_bundle():
    assert BundleUtils.get_bundle_name('corp.billing_bundle.models.Invoice') == 'billing'


def test_no_bundle():
    assert BundleUtils.get_bundle_name('corp.models.Order') is None


def test_class_and_instance():
    order_cls = type('Order', (), {'__module__': 'shop.CheckoutBundle.models'})

    assert BundleUtils.get_bundle_name(order_cls) == 'Checkout'
    assert BundleUtils.get_bundle_name(order_cls()) == 'Checkout'
