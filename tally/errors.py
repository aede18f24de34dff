from .person import Person


class TallyError(Exception):
    pass


class NegativeIdentifierError(TallyError, ValueError):
    def __init__(self, person: Person) -> None:
        super().__init__(f"{person.name} has a negative id of {person.id}")
        self.person = person
