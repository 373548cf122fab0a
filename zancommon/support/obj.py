"""
Object Reflection Helpers
Attribute, getter and setter access that walks the class hierarchy
"""
import inspect
from typing import Any, Callable, List, Tuple, Type

from zancommon.exceptions import PropertyNotFoundException


class Obj:
    """
    Reflection helpers

    Example:
        Obj.get_property_value(user, 'department.name', use_getter=True)
        # calls user.get_department().get_name() where those getters exist

        Obj.set_property(user, 'name', 'Jim')  # calls user.set_name('Jim') if public
    """

    @staticmethod
    def _class_of(obj_or_cls: Any) -> Type:
        return obj_or_cls if inspect.isclass(obj_or_cls) else type(obj_or_cls)

    @staticmethod
    def get_methods(obj_or_cls: Any) -> List[Tuple[str, Callable]]:
        """
        Returns all methods on a class including ones inherited from parent classes

        Args:
            obj_or_cls: Instance or class

        Returns:
            List of (name, routine) tuples
        """
        return inspect.getmembers(Obj._class_of(obj_or_cls), inspect.isroutine)

    @staticmethod
    def has_method(obj_or_cls: Any, method_name: str) -> bool:
        """Returns True if method_name exists on the class or any parent class"""
        return inspect.isroutine(getattr(Obj._class_of(obj_or_cls), method_name, None))

    @staticmethod
    def has_public_method(obj_or_cls: Any, method_name: str) -> bool:
        """Returns True if method_name exists and does not start with an underscore"""
        return not method_name.startswith('_') and Obj.has_method(obj_or_cls, method_name)

    @staticmethod
    def _declares(cls: Type, name: str) -> bool:
        return (
            name in vars(cls)
            or name in getattr(cls, '__annotations__', {})
            or name in getattr(cls, '__slots__', ())
        )

    @staticmethod
    def get_property(obj_or_cls: Any, name: str) -> Type:
        """
        Returns the class that declares the given property

        Class attributes, annotations and slots are searched from the class up
        through its parents. For instances, attributes set on the instance
        itself belong to its class.

        Args:
            obj_or_cls: Instance or class
            name: Property name

        Returns:
            The declaring class

        Raises:
            PropertyNotFoundException: If no class in the hierarchy declares it
        """
        cls = Obj._class_of(obj_or_cls)

        if not inspect.isclass(obj_or_cls) and name in getattr(obj_or_cls, '__dict__', {}):
            return cls

        for klass in cls.__mro__:
            if Obj._declares(klass, name):
                return klass

        raise PropertyNotFoundException(
            f"Could not find property {name} in {cls.__name__} or any of its parent classes"
        )

    @staticmethod
    def get_properties(obj_or_cls: Any) -> List[str]:
        """
        Returns the property names declared on a class and its parents

        Own properties come first. Methods and dunder names are skipped.
        """
        properties = []
        for klass in Obj._class_of(obj_or_cls).__mro__:
            if klass is object:
                continue

            names = list(getattr(klass, '__annotations__', {}))
            names += [
                name for name, member in vars(klass).items()
                if not inspect.isroutine(member) and not isinstance(member, (classmethod, staticmethod))
            ]
            slots = getattr(klass, '__slots__', ())
            names += [slots] if isinstance(slots, str) else list(slots)

            for name in names:
                if name.startswith('__') or name in properties:
                    continue
                properties.append(name)

        return properties

    @staticmethod
    def get_property_value(obj: Any, property_name: str, use_getter: bool = False) -> Any:
        """
        Returns the value of a property, following dotted paths

        Args:
            obj: Object to read from
            property_name: Property name, e.g. 'department.name'
            use_getter: Call get_<name>() when such a method exists

        Returns:
            The property value

        Raises:
            PropertyNotFoundException: If a property in the path does not exist
        """
        name, _, remaining = property_name.partition('.')

        getter = f"get_{name}"
        if use_getter and Obj.has_method(obj, getter):
            value = getattr(obj, getter)()
        else:
            try:
                value = getattr(obj, name)
            except AttributeError:
                Obj.get_property(obj, name)
                raise

        if remaining:
            return Obj.get_property_value(value, remaining, use_getter)

        return value

    @staticmethod
    def set_property(obj: Any, property_name: str, value: Any) -> bool:
        """
        Calls obj.set_<property_name>(value) if a public setter exists

        Returns:
            True if the setter was found and called
        """
        setter = f"set_{property_name}"
        if not Obj.has_public_method(obj, setter):
            return False

        getattr(obj, setter)(value)
        return True
