"""Command input normalization.

Accepts the two supported input shapes and turns them into an immutable
sequence of :class:`~warehouse_robot.actions.Direction` values:

* text with tokens separated by :data:`COMMAND_DELIMITER` (``"N,E,S,W"``);
* an ordered sequence of tokens, each a short code (``"N"``) or a
  ``Direction`` member.

The whole input is validated before anything is returned, so callers either
get a complete, valid sequence or an exception; never a prefix.
"""

import logging
from collections.abc import Sequence
from typing import List

from pyrsistent import pvector
from pyrsistent.typing import PVector

from warehouse_robot.actions import Direction, lookup_direction
from warehouse_robot.errors import InvalidArgument, InvalidCommand
from warehouse_robot.types import CommandInput

logger = logging.getLogger(__name__)

COMMAND_DELIMITER = ","


def tokenize(commands: CommandInput) -> List[object]:
    """Split ``commands`` into raw tokens without validating them.

    Text is split on :data:`COMMAND_DELIMITER`; tokens are not trimmed.
    Trailing empty fields are dropped, so ``""`` yields no tokens and ``"N,E,"``
    yields ``["N", "E"]``. Empty fields between tokens (``"N,,E"``) are kept and
    fail validation.

    Raises:
        InvalidArgument: If ``commands`` is neither text nor a sequence.
    """
    if isinstance(commands, str):
        tokens: List[object] = list(commands.split(COMMAND_DELIMITER))
        while tokens and tokens[-1] == "":
            tokens.pop()
        return tokens
    if isinstance(commands, (bytes, bytearray)) or not isinstance(commands, Sequence):
        raise InvalidArgument(
            f"commands must be a str or a sequence of tokens, got {type(commands).__name__}"
        )
    return list(commands)


def normalize_commands(commands: CommandInput) -> PVector[Direction]:
    """Validate ``commands`` and return them as directions.

    Raises:
        InvalidArgument: If ``commands`` has an unsupported type.
        InvalidCommand: If any token does not resolve to a direction. The
            exception lists every invalid token, in input order.
    """
    tokens = tokenize(commands)
    directions: List[Direction] = []
    invalid: List[object] = []
    for token in tokens:
        direction = lookup_direction(token)
        if direction is None:
            invalid.append(token)
        else:
            directions.append(direction)

    if invalid:
        logger.debug("Rejected %d invalid token(s): %r", len(invalid), invalid)
        raise InvalidCommand(invalid)

    return pvector(directions)
