"""
Helpers shared by the command handlers
"""
from stock_tracker.cli.output import console, escape
from stock_tracker.core.exceptions import InvalidInputError, ParseError

CONFIRM_YES = {"y", "yes"}
CONFIRM_NO = {"n", "no", "q", "quit"}


def confirm_delete(kind: str, key: str) -> bool:
    """
    Ask on stdin whether ``key`` should really be deleted

    Returns:
        True for y/yes, False for n/no/q/quit (any case)

    Raises:
        InvalidInputError: Any other answer, or end of input
    """
    try:
        answer = console.input(
            f"Are you sure you want to delete {kind} {escape(key)}? \\[y/n] "
        )
    except EOFError:
        raise InvalidInputError() from None

    answer = answer.strip().lower()
    if answer in CONFIRM_YES:
        return True
    if answer in CONFIRM_NO:
        return False
    raise InvalidInputError()


def parse_int(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ParseError(raw, "int") from None
