from typing import Callable, Protocol, TypeVar

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)

Predicate = Callable[[T], bool]


class Property(Protocol[T_contra]):
    def has_property(self, element: T_contra) -> bool:
        ...


def as_predicate(property: Property[T]) -> Predicate[T]:
    """Expose a property wherever a plain predicate is expected"""

    return property.has_property
