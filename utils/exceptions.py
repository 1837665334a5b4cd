"""
utils/exceptions.py
-------------------
Domain-level lookup failure raised by the data access layer.
Driver faults (psycopg2.Error) are not wrapped and reach callers unchanged.
"""


class ObjectRetrievalFailure(LookupError):
    """
    Raised when an entity expected by id does not exist.

    Attributes:
        entity_type: The domain class that was looked up.
        identifier: The id that matched nothing.
    """

    def __init__(self, entity_type: type, identifier):
        self.entity_type = entity_type
        self.identifier = identifier
        super().__init__(
            f"Object of class [{entity_type.__name__}] with identifier [{identifier}]: not found"
        )
