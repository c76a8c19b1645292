#!filepath: tests/utils/test_logger.py
import pytest
from loguru import logger

from breadsim import logs
from breadsim.utils.errors import UserInputError, ValidationError


@pytest.fixture
def captured():
    lines = []
    sink_id = logger.add(lambda msg: lines.append(str(msg)), level="DEBUG")
    yield lines
    logger.remove(sink_id)


def test_catch_logs_and_reraises(captured):
    @logs.catch(msg="boom failed")
    def boom():
        raise KeyError("x")

    with pytest.raises(KeyError):
        boom()

    output = "\n".join(captured)
    assert "[ERROR] boom: boom failed" in output
    assert "Traceback" in output


def test_catch_user_input_error_is_quiet(captured):
    @logs.catch(reraise_quietly=(UserInputError,))
    def parse():
        raise ValidationError("(0,0)", "day must be >= 1")

    with pytest.raises(ValidationError):
        parse()

    output = "\n".join(captured)
    assert "WARNING" in output
    assert "Traceback" not in output


def test_catch_passes_result_through():
    @logs.catch()
    def ok():
        return 42

    assert ok() == 42


def test_error_exit_codes_are_distinct():
    from breadsim.utils.errors import (
        ArgumentCountError,
        MalformedTupleError,
        NonIntegerArgumentError,
    )

    assert ArgumentCountError.exit_code == NonIntegerArgumentError.exit_code == 2
    assert MalformedTupleError.exit_code == 3
    assert ValidationError.exit_code == 4
    assert issubclass(ValidationError, UserInputError)
