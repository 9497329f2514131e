"""
Guard - precondition checks shared by every layer of the client core.

Usage:
    from melonbar.guard import non_null, not_empty

    non_null(request, processor)   # raises NullArgumentError on the first None
    not_empty(products)            # raises EmptyCollectionError on None or []
"""

from typing import Any, Optional, Sized

from melonbar.exceptions import EmptyCollectionError, NullArgumentError


def non_null(*objects: Any) -> None:
    """
    Ensure all arguments are not None.

    Short circuits on the first None, so if there is more than one None
    argument only the first occurrence is reported.

    Args:
        *objects: Values to verify

    Raises:
        NullArgumentError: On the first None argument

    Example:
        >>> non_null("a", None, None)
        Traceback (most recent call last):
        ...
        melonbar.exceptions.NullArgumentError: Null object found in ['a', None, None] at i=1
    """
    for i, obj in enumerate(objects):
        if obj is None:
            raise NullArgumentError(f"Null object found in {list(objects)} at i={i}", i)


def not_empty(collection: Optional[Sized]) -> None:
    """
    Ensure a collection is neither None nor empty.

    Raises:
        EmptyCollectionError: Naming the collection's type
    """
    if collection is None or len(collection) < 1:
        type_name = None if collection is None else type(collection).__name__
        raise EmptyCollectionError(f"Input collection [{type_name}] is empty!", type_name)
