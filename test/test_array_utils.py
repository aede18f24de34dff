import pytest
from tally.array_utils import ArrayUtils
from tally.person import Person, sample_people
from tally.predicate import as_predicate
from tally.properties import OddProperty, PalindromeIdProperty, PalindromeProperty, PrimeProperty


class RecordingProperty:
    def __init__(self) -> None:
        self.seen = []

    def has_property(self, element) -> bool:
        self.seen.append(element)
        return True


def test_sample_people_have_one_palindromic_id():
    assert ArrayUtils.count_elements_with_property(sample_people(), PalindromeIdProperty()) == 1


def test_empty_sequence():
    assert ArrayUtils.count_elements_with_property([], OddProperty()) == 0


@pytest.mark.parametrize(
    ["elements", "property", "expected"],
    [
        pytest.param(list(range(10)), OddProperty(), 5, id="Odd numbers"),
        pytest.param(list(range(20)), PrimeProperty(), 8, id="Primes"),
        pytest.param(["level", "tally", "", "noon"], PalindromeProperty(), 3, id="Palindromes"),
        pytest.param([2, 4, 6], OddProperty(), 0, id="None match"),
        pytest.param([1, 3, 5], OddProperty(), 3, id="All match"),
    ],
)
def test_counts(elements, property, expected):
    count = ArrayUtils.count_elements_with_property(elements, property)

    assert count == expected
    assert 0 <= count <= len(elements)


def test_every_element_is_checked():
    elements = [1, 2, 3, 4]
    recorder = RecordingProperty()

    ArrayUtils.count_elements_with_property(elements, recorder)

    assert recorder.seen == elements


def test_sequence_is_not_mutated():
    people = sample_people()

    ArrayUtils.count_elements_with_property(people, PalindromeIdProperty())

    assert people == sample_people()


def test_accepts_generators():
    assert ArrayUtils.count_elements_with_property((n for n in range(1, 8)), PrimeProperty()) == 4


def test_plain_predicate():
    assert ArrayUtils.count_elements_matching([1, 2, 3, 4], lambda n: n > 2) == 2


def test_property_as_predicate():
    people = [Person("Ann", 121), Person("Ben", 122)]

    assert ArrayUtils.count_elements_matching(people, as_predicate(PalindromeIdProperty())) == 1
