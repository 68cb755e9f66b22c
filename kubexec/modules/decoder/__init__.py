"""
Decoder Module - Black Box Interface

Purpose: Turn a response (status + body bytes) into a typed outcome
Interface: ResponseDecoder.append(), ResponseDecoder.parse(), decode()
Hidden: UTF-8/JSON truncation detection, per-operation response grammars

Decoding is pure: it never touches state outside the current response.
"""

from .decoder import ResponseDecoder, decode
from .grammar import GRAMMARS, Operation, ResponseGrammar, ShapeError, grammar_for
from .outcomes import DecodeOutcome, MalformedResponse, NeedMoreData, Success, UnexpectedVariant
from .records import (
    ObjectMeta,
    ServiceRecord,
    StatusRecord,
    WorkloadListRecord,
    WorkloadRecord,
)

__all__ = [
    "GRAMMARS",
    "DecodeOutcome",
    "MalformedResponse",
    "NeedMoreData",
    "ObjectMeta",
    "Operation",
    "ResponseDecoder",
    "ResponseGrammar",
    "ServiceRecord",
    "ShapeError",
    "StatusRecord",
    "Success",
    "UnexpectedVariant",
    "WorkloadListRecord",
    "WorkloadRecord",
    "decode",
    "grammar_for",
]
