from typing import Iterable

import structlog

from .predicate import Predicate, Property, T

logger = structlog.get_logger("ArrayUtils")


# --------------------------------------------------------------------------------
class ArrayUtils:
    @staticmethod
    def count_elements_with_property(elements: Iterable[T], property: Property[T]) -> int:
        """Count how many elements have the property. Every element is checked."""

        count = 0
        for element in elements:
            if property.has_property(element):
                count += 1

        logger.debug("Counted elements with property", property=type(property).__name__, count=count)
        return count

    @staticmethod
    def count_elements_matching(elements: Iterable[T], predicate: Predicate[T]) -> int:
        count = 0
        for element in elements:
            if predicate(element):
                count += 1

        logger.debug("Counted elements matching predicate", predicate=getattr(predicate, "__qualname__", repr(predicate)), count=count)
        return count
