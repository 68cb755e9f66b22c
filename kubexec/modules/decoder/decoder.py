"""
Incremental response decoder.

A ResponseDecoder is one decode session for one response. Bytes are
appended as they arrive and parse() may be called at any point:

    decoder = ResponseDecoder(Operation.LIST_WORKLOADS, response.status)
    for chunk in chunks:
        decoder.append(chunk)
        outcome = decoder.parse()
        if not isinstance(outcome, NeedMoreData):
            break

parse() never consumes or changes the buffer, so the same bytes always
decode to the same outcome.
"""

import codecs
import json
import re
from typing import Any, Tuple

from pydantic import ValidationError

from .grammar import Operation, ShapeError, grammar_for
from .outcomes import DecodeOutcome, MalformedResponse, NeedMoreData, Success, UnexpectedVariant

_PARTIAL_LITERALS = ("true", "false", "null", "NaN", "Infinity", "-Infinity")
_PARTIAL_NUMBER_TAIL = re.compile(r"\.|[eE][-+]?")
_PARTIAL_UNICODE_ESCAPE = re.compile(r"\\?u[0-9a-fA-F]{0,4}")


def _decode_text(data: bytes) -> Tuple[str, bool]:
    """Decode UTF-8, reporting whether the data stops inside a multi-byte sequence."""
    decoder = codecs.getincrementaldecoder("utf-8")()
    text = decoder.decode(data, final=False)
    pending, _ = decoder.getstate()
    return text, not pending


def _is_truncated(error: json.JSONDecodeError, text: str) -> bool:
    """True when a JSON error is caused by the text ending early rather than by bad input."""
    if error.msg.startswith("Extra data"):
        return False
    rest = text[error.pos:]
    if not rest.strip():
        return True
    if error.msg.startswith("Unterminated string"):
        return True
    # "\u00" at the end of the text is an escape still missing hex digits
    if error.msg.startswith("Invalid \\uXXXX escape") and _PARTIAL_UNICODE_ESCAPE.fullmatch(rest):
        return True
    if any(literal.startswith(rest) for literal in _PARTIAL_LITERALS):
        return True
    if rest == "-":
        return True
    # "1." or "1e+" stop the number scanner at the tail
    if _PARTIAL_NUMBER_TAIL.fullmatch(rest) and error.pos > 0 and text[error.pos - 1].isdigit():
        return True
    return False


class ResponseDecoder:
    """Decode session for one response of one operation."""

    def __init__(self, operation: Operation, status: int):
        """
        Initialize decode session.

        Args:
            operation: Operation whose response grammar applies
            status: HTTP status code of the response
        """
        self.grammar = grammar_for(operation)
        self.status = status
        self._buffer = bytearray()

    @property
    def operation(self) -> Operation:
        return self.grammar.operation

    @property
    def received(self) -> int:
        """Number of body bytes appended so far."""
        return len(self._buffer)

    def append(self, data: bytes) -> None:
        """Append more bytes of the same response body."""
        self._buffer.extend(data)

    def parse(self) -> DecodeOutcome:
        """
        Interpret the bytes received so far.

        Returns:
            Success, UnexpectedVariant, MalformedResponse, or NeedMoreData
            when the body so far is a valid prefix that cannot be decided yet.
        """
        try:
            text, complete = _decode_text(bytes(self._buffer))
        except UnicodeDecodeError as e:
            return MalformedResponse(self.status, f"invalid UTF-8: {e}")
        if not complete:
            return NeedMoreData()

        shape = self.grammar.shapes.get(self.status)

        if not text.strip():
            # An empty error body is still a complete answer
            if shape is None:
                return UnexpectedVariant(self.status, None)
            return NeedMoreData()

        try:
            value: Any = json.loads(text)
        except json.JSONDecodeError as e:
            if _is_truncated(e, text):
                return NeedMoreData()
            return MalformedResponse(self.status, f"invalid JSON: {e}")

        if shape is None:
            return UnexpectedVariant(self.status, value)

        try:
            variant, payload = shape(value)
        except (ValidationError, ShapeError) as e:
            return MalformedResponse(
                self.status, f"unexpected {self.operation.value} payload: {e}"
            )
        return Success(self.status, variant, payload)


def decode(operation: Operation, status: int, body: bytes) -> DecodeOutcome:
    """Decode a complete captured response in one step."""
    decoder = ResponseDecoder(operation, status)
    decoder.append(body)
    return decoder.parse()
