"""Error codes, the exception that carries them, and the messages shown for them."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Optional, TextIO, Union


class ErrorCode(IntEnum):
    """Reasons the viewer can fail; the value doubles as the exit status."""

    NONE = 0
    MALLOC = 1
    ARGS = 2
    INVALID_NUMBER = 3
    INVALID_AMOUNT = 4
    INVALID_FRACTAL = 5
    DISPLAY = 6
    WINDOW = 7
    IMAGE = 8
    IMAGE_ADDRESS = 9
    UNKNOWN = 10


USAGE = "Usages:\nfractscope mandelbrot\nfractscope julia <real>\t<imaginary>\n"

_MESSAGES = {
    ErrorCode.ARGS: "Error: Invalid arguments.\n",
    ErrorCode.INVALID_NUMBER: "Error: argument is not a valid number.\n",
    ErrorCode.INVALID_AMOUNT: "Error: Invalid arguments amount.\n",
    ErrorCode.INVALID_FRACTAL: "Error: Invalid fractal name.\n",
}


def error_message(code: Union[ErrorCode, int]) -> Optional[str]:
    """The message line for an argument error, or ``None`` for codes without one."""
    return _MESSAGES.get(ErrorCode(code))


class FractolError(Exception):
    """Raised when the viewer cannot go on; ``code`` tells why."""

    def __init__(self, code: Union[ErrorCode, int]) -> None:
        self.code = ErrorCode(code)
        message = error_message(self.code) or f"Error: {self.code.name.lower()}"
        super().__init__(message.strip())


def show_error(
    error: Union[FractolError, ErrorCode, int], stream: Optional[TextIO] = None
) -> ErrorCode:
    """Write the message for ``error`` (if it has one) and the usage text.

    Returns the error code.
    """
    code = error.code if isinstance(error, FractolError) else ErrorCode(error)
    out = stream if stream is not None else sys.stdout
    message = error_message(code)
    if message is not None:
        out.write(message)
    out.write(USAGE)
    return code