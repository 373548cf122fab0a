"""
Exceptions Package
"""
from zancommon.exceptions.custom import (
    ZanException,
    PropertyNotFoundException,
    InvalidEntityException,
)

__all__ = [
    'ZanException',
    'PropertyNotFoundException',
    'InvalidEntityException',
]
