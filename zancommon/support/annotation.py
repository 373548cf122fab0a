"""
Annotation Helpers
Lookup of typing.Annotated metadata attached to class properties
"""
from typing import Any, Annotated, Optional, get_args, get_origin, get_type_hints

from zancommon.exceptions import PropertyNotFoundException
from zancommon.support.obj import Obj


class Annotation:
    """
    Property annotation lookup

    Example:
        class Column:
            def __init__(self, name): self.name = name

        class Order:
            total: Annotated[int, Column('order_total')]

        Annotation.has_property_annotation(Column, Order, 'total')           # True
        Annotation.get_property_annotation(Column, Order, 'total').name      # 'order_total'
    """

    @staticmethod
    def get_property_annotation(annotation_type: Any, obj_or_cls: Any, property_name: str) -> Optional[Any]:
        """
        Returns the first Annotated metadata item matching annotation_type

        A metadata item matches when it is an instance of annotation_type or is
        annotation_type itself.

        Raises:
            PropertyNotFoundException: If the property does not exist
        """
        owner = Obj.get_property(obj_or_cls, property_name)

        hint = get_type_hints(owner, include_extras=True).get(property_name)
        if get_origin(hint) is not Annotated:
            return None

        for meta in get_args(hint)[1:]:
            if meta is annotation_type:
                return meta
            if isinstance(annotation_type, type) and isinstance(meta, annotation_type):
                return meta

        return None

    @staticmethod
    def has_property_annotation(annotation_type: Any, obj_or_cls: Any, property_name: str) -> bool:
        """Returns True if the property carries annotation_type, False if missing"""
        try:
            return Annotation.get_property_annotation(annotation_type, obj_or_cls, property_name) is not None
        except PropertyNotFoundException:
            return False
