"""
Status Decoder - turns a raw ``statusResponse`` payload into a StatusResponse

Reply layout (after the out-of-band marker):

    statusResponse\\n
    \\key\\value\\key\\value...\\n
    <score> <ping> "<name>"\\n     (one line per player)
    \\0\\0\\0...                      (optional padding)
"""

import logging
import re
from typing import Callable, Dict, List, Optional, Union

from ..errors import MalformedResponseError
from ..models.player import Player
from ..models.status import StatusResponse
from .constants import (
    LINE_DELIMITER, VARIABLE_DELIMITER, PLAYER_TERMINATOR,
    MAX_SCORE, MAX_PING
)

logger = logging.getLogger(__name__)

PlayerParser = Callable[[str], Optional[Player]]

_UNSIGNED = re.compile(r"\+?[0-9]+")

# Whitespace except the \x1c-\x1f separators, which str.split() would also split on
_FIELD_SEPARATOR = re.compile(r"[^\S\x1c-\x1f]+")


def parse_unsigned(token: str, maximum: int) -> int:
    """
    Parse an unsigned decimal field, falling back to 0.

    Anything that is not a plain non-negative number within ``maximum``
    (signs, fractions, overflow) yields 0 rather than an error.
    """
    if not _UNSIGNED.fullmatch(token):
        return 0
    digits = token.lstrip("+").lstrip("0")
    if len(digits) > len(str(maximum)):
        return 0
    value = int(digits) if digits else 0
    return value if value <= maximum else 0


def parse_variables(segment: str) -> Dict[str, str]:
    """
    Parse ``\\key\\value`` pairs.

    Leading empty tokens are dropped, pairs are consumed in order, an unpaired
    trailing token is ignored and later duplicates overwrite earlier keys.
    """
    tokens = segment.split(VARIABLE_DELIMITER)

    start = 0
    while start < len(tokens) and tokens[start] == "":
        start += 1
    tokens = tokens[start:]

    if len(tokens) % 2:
        logger.debug(f"Dropping unpaired variable token {tokens[-1]!r}")

    variables = {}
    for index in range(0, len(tokens) - 1, 2):
        variables[tokens[index]] = tokens[index + 1]
    return variables


def parse_player_line(line: str) -> Optional[Player]:
    """
    Positional player parser: ``score ping name``.

    The name is exactly the third whitespace-separated token, quotes included;
    anything after it is lost. Returns None for lines with fewer than three
    tokens. Fields are separated by Unicode whitespace; the control
    characters \\x1c-\\x1f stay inside a token.
    """
    parts = [part for part in _FIELD_SEPARATOR.split(line) if part]
    if len(parts) < 3:
        return None

    return Player(
        score=parse_unsigned(parts[0], MAX_SCORE),
        ping=parse_unsigned(parts[1], MAX_PING),
        name=parts[2]
    )


class StatusDecoder:
    """
    Stateless decoder for status replies.

    Args:
        player_parser: Callable turning one roster line into a Player, or None
            to skip the line. Defaults to :func:`parse_player_line`.
    """

    def __init__(self, player_parser: Optional[PlayerParser] = None):
        self.player_parser = player_parser or parse_player_line

    def decode(self, payload: Union[bytes, bytearray, memoryview]) -> StatusResponse:
        """
        Decode a reply payload.

        Raises:
            MalformedResponseError: if the header or body separator is missing
        """
        text = bytes(payload).decode("utf-8", errors="replace")

        header, sep, body = text.partition(LINE_DELIMITER)
        if not sep:
            raise MalformedResponseError("missing header separator")

        variables_segment, sep, players_segment = body.partition(LINE_DELIMITER)
        if not sep:
            raise MalformedResponseError("missing body separator")

        return StatusResponse(
            header=header,
            variables=parse_variables(variables_segment),
            players=self.decode_players(players_segment)
        )

    def decode_players(self, segment: str) -> List[Player]:
        """Parse the roster, skipping padding, blank and short lines."""
        players = []
        for line in segment.split(LINE_DELIMITER):
            if line.startswith(PLAYER_TERMINATOR):
                continue
            if not line.strip():
                continue

            player = self.player_parser(line)
            if player is None:
                logger.debug(f"Skipping short player line {line!r}")
                continue
            players.append(player)
        return players


_default_decoder = StatusDecoder()


def decode_status(payload: Union[bytes, bytearray, memoryview]) -> StatusResponse:
    """Decode a status reply with the default positional player parser."""
    return _default_decoder.decode(payload)
