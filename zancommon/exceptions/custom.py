"""
Custom Exception Classes
Bundle-specific exceptions with HTTP status codes
"""
from typing import Optional


class ZanException(Exception):
    """Base exception for all bundle exceptions"""
    status_code = 500
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class PropertyNotFoundException(ZanException, AttributeError):
    """
    Property lookup exception

    Raised when a property cannot be found on a class or any of its parents

    Example:
        raise PropertyNotFoundException("Could not find property name in User")
    """
    message = "Property not found"


class InvalidEntityException(ZanException, ValueError):
    """
    Invalid entity exception

    Raised when an object passed as an entity has no primary key attribute

    Example:
        raise InvalidEntityException("Entity.is_same requires a pk or id attribute")
    """
    status_code = 400
    message = "Invalid entity"
