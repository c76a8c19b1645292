# breadsim/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided input (arguments, delivery spec).
    Should NOT print traceback.
    """

    exit_code: int = 1


class ArgumentCountError(UserInputError):
    """Required positional arguments are missing."""

    exit_code = 2


class NonIntegerArgumentError(UserInputError):
    """NUM_DAYS is not a positive integer."""

    exit_code = 2


class MalformedTupleError(UserInputError):
    """A delivery token does not have the `(integer,integer)` shape."""

    exit_code = 3

    def __init__(self, token: str, reason: str = "expected (day,quantity)"):
        super().__init__(f"Malformed delivery tuple {token!r}: {reason}")
        self.token = token


class ValidationError(UserInputError):
    """A well-formed tuple with `day < 1` or `quantity <= 0`."""

    exit_code = 4

    def __init__(self, token: str, reason: str):
        super().__init__(f"Invalid delivery tuple {token!r}: {reason}")
        self.token = token
