"""
Entity Helpers
Identity checks for database models
"""
from typing import Any, Optional

from zancommon.exceptions import InvalidEntityException


class Entity:
    """
    Helpers for Tortoise models and other objects carrying a primary key
    """

    @staticmethod
    def _get_id(entity: Any) -> Any:
        # Tortoise models expose the primary key as .pk whatever the field is called
        for attr in ('pk', 'id'):
            if hasattr(entity, attr):
                return getattr(entity, attr)

        raise InvalidEntityException(
            f"Entity.is_same requires that {type(entity).__name__} has a pk or id attribute"
        )

    @staticmethod
    def is_same(a: Optional[Any], b: Optional[Any]) -> bool:
        """
        Determines if two entities should be considered the same database record

        Handles these cases:
            1. Two existing entities are compared by primary key
            2. A new entity compared to itself is the same
            3. Two new (unsaved) entities are never the same

        Composite primary keys are not supported.

        Raises:
            InvalidEntityException: If either object has no pk or id attribute
        """
        if not a or not b:
            return False

        if a is b:
            return True

        if type(a) is not type(b):
            return False

        a_id = Entity._get_id(a)
        b_id = Entity._get_id(b)

        # 0 is never a database id
        if not a_id or not b_id:
            return False

        return a_id == b_id
