"""
Exceptions raised by the client core.

Only precondition failures are raised. Parse and mapping failures in the
post-processing pipeline are logged and returned as None instead.
"""


class MelonbarException(Exception):
    """Base class for all client core exceptions"""

    error_code = 'internal_error'

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {
            'error': self.error_code,
            'message': self.message,
            'details': self.details
        }


class NullArgumentError(MelonbarException, ValueError):
    """A required argument was None"""

    error_code = 'null_argument'

    def __init__(self, message: str, index: int):
        self.index = index
        super().__init__(message, {'index': index})


class EmptyCollectionError(MelonbarException, ValueError):
    """A collection that must hold at least one item was None or empty"""

    error_code = 'empty_collection'

    def __init__(self, message: str, collection_type: str = None):
        self.collection_type = collection_type
        super().__init__(message, {'collection_type': collection_type})
