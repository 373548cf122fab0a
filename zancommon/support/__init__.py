"""
Support Classes
"""

from zancommon.support.config import Config
from zancommon.support.str import Str
from zancommon.support.arr import Arr
from zancommon.support.obj import Obj
from zancommon.support.entity import Entity
from zancommon.support.bundle_utils import BundleUtils
from zancommon.support.annotation import Annotation
from zancommon.support.debug import Debug

__all__ = [
    'Config',
    'Str',
    'Arr',
    'Obj',
    'Entity',
    'BundleUtils',
    'Annotation',
    'Debug',
]
