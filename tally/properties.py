from .errors import NegativeIdentifierError
from .person import Person


# --------------------------------------------------------------------------------
class OddProperty:
    def has_property(self, element: int) -> bool:
        return element % 2 != 0


# --------------------------------------------------------------------------------
class PrimeProperty:
    def has_property(self, element: int) -> bool:
        if element < 2:
            return False

        # Compare squares so large values never hit float rounding
        divisor = 2
        while divisor * divisor <= element:
            if element % divisor == 0:
                return False
            divisor += 1

        return True


# --------------------------------------------------------------------------------
class PalindromeProperty:
    def has_property(self, element: str) -> bool:
        length = len(element)
        for i in range(length // 2):
            if element[i] != element[length - i - 1]:
                return False
        return True


# --------------------------------------------------------------------------------
class PalindromeIdProperty:
    """Checks whether the decimal digits of a person's id read the same both ways.

    Negative ids never reverse to themselves so they are reported as not being
    palindromes. Pass reject_negative=True to have them raise instead.
    """

    def __init__(self, reject_negative: bool = False) -> None:
        self.reject_negative = reject_negative

    def has_property(self, person: Person) -> bool:
        original_id = person.id
        if original_id < 0 and self.reject_negative:
            raise NegativeIdentifierError(person)

        remaining = original_id
        reversed_id = 0
        while remaining > 0:
            remaining, digit = divmod(remaining, 10)
            reversed_id = reversed_id * 10 + digit

        return original_id == reversed_id
