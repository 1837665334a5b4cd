"""
utils/entity_utils.py
---------------------
Helpers for working with collections of loaded entities.
"""

from typing import Iterable, TypeVar

from utils.exceptions import ObjectRetrievalFailure

T = TypeVar("T")


def get_by_id(entities: Iterable[T], entity_class: type[T], entity_id: int) -> T:
    """
    Pick the entity of the given class whose `id` equals `entity_id`.

    Raises:
        ObjectRetrievalFailure: If no entity matches.
    """
    for entity in entities:
        if isinstance(entity, entity_class) and entity.id == entity_id:
            return entity
    raise ObjectRetrievalFailure(entity_class, entity_id)
