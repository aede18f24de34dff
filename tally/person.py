from dataclasses import dataclass
from typing import List


@dataclass
class Person:
    name: str
    id: int


def sample_people() -> List[Person]:
    return [
        Person("Alice", 12321),
        Person("Bob", 12345),
        Person("Charlie", 12343),
    ]
