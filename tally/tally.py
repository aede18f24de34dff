import logging
import os
import sys
from typing import List, Optional

import structlog
import typer
from dotenv import load_dotenv

from tally.array_utils import ArrayUtils
from tally.errors import NegativeIdentifierError, TallyError
from tally.person import Person, sample_people
from tally.properties import PalindromeIdProperty

load_dotenv()


class Tally:
    def __init__(self) -> None:
        Tally.__configure_logging(Tally.log_level_from_environment())
        self.__logger = structlog.get_logger(self.__class__.__name__)

    @staticmethod
    def log_level_from_environment() -> int:
        name = os.environ.get("TALLY_LOG_LEVEL", "INFO")
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise TallyError(f"TALLY_LOG_LEVEL of '{name}' is not a log level")
        return level

    @staticmethod
    def __configure_logging(level: int):

        # stdout only carries the count
        logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
        structlog.configure(
            processors=[
                structlog.processors.add_log_level,
                structlog.processors.StackInfoRenderer(),
                structlog.dev.set_exc_info,
                structlog.processors.CallsiteParameterAdder([structlog.processors.CallsiteParameter.MODULE, structlog.processors.CallsiteParameter.FUNC_NAME]),
                structlog.contextvars.merge_contextvars,
                structlog.processors.TimeStamper("iso"),
                structlog.dev.ConsoleRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
            cache_logger_on_first_use=False,
        )

    @staticmethod
    def parse_person(text: str) -> Person:
        name, separator, id_text = text.rpartition(":")
        if not separator or not name:
            raise typer.BadParameter(f"'{text}' should look like NAME:ID")
        try:
            return Person(name, int(id_text))
        except ValueError as err:
            raise typer.BadParameter(f"'{id_text}' is not a whole number") from err

    def tally(
        self,
        person: Optional[List[str]] = typer.Option(
            default=None,
            help="Count this NAME:ID instead of the sample people. Repeat for more people.",
        ),
        reject_negative_ids: bool = typer.Option(
            default=False,
            help="Fail on negative ids rather than treating them as not palindromic.",
        ),
        verbose: bool = typer.Option(
            default=False,
            help="Log debug detail to stderr.",
        ),
    ):
        """
        Count the people whose id is a palindrome.
        """

        if verbose:
            structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG))

        if person:
            people = [Tally.parse_person(text) for text in person]
        else:
            people = sample_people()
            self.__logger.debug("Using the sample people")

        self.__logger.debug("People being counted", size=len(people))

        try:
            count = ArrayUtils.count_elements_with_property(people, PalindromeIdProperty(reject_negative=reject_negative_ids))
        except NegativeIdentifierError as err:
            self.__logger.error("Unable to count palindromic ids", reason=str(err))
            raise typer.Exit(code=1) from err

        self.__logger.info("Palindromic ids", count=count)
        typer.echo(count)


def main() -> None:
    typer.run(Tally().tally)


if __name__ == "__main__":
    main()
