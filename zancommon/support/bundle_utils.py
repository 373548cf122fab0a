"""
Bundle Helpers
"""
import re
from typing import Any, Optional

from zancommon.support.str import Str


class BundleUtils:
    """
    Helpers for code organised into bundles
    """

    BUNDLE_POSTFIXES = ['Bundle', '_bundle']

    @staticmethod
    def get_bundle_name(obj_or_path: Any) -> Optional[str]:
        """
        Returns the bundle name from the path of an object, class or dotted string

        The first path segment ending with 'Bundle' (or '_bundle') is used,
        without that postfix.

        Args:
            obj_or_path: Object, class, or path such as 'corp.SomeProductBundle.models.Order'

        Returns:
            Bundle name, or None if no segment names a bundle

        Example:
            BundleUtils.get_bundle_name('corp.SomeProductBundle.models.Order')  # 'SomeProduct'
            BundleUtils.get_bundle_name('corp.billing_bundle.models')           # 'billing'
            BundleUtils.get_bundle_name(order)  # uses type(order).__module__
        """
        if isinstance(obj_or_path, str):
            path = obj_or_path
        else:
            cls = obj_or_path if isinstance(obj_or_path, type) else type(obj_or_path)
            path = f"{cls.__module__}.{cls.__qualname__}"

        for part in re.split(r'[.\\]', path):
            for postfix in BundleUtils.BUNDLE_POSTFIXES:
                if part != postfix and Str.ends_with(part, postfix):
                    return Str.remove_postfix(part, postfix)

        return None
