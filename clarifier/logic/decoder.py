"""Tagged-pair decoder for clarification questions.

Pure logic, no I/O. Turns backend records shaped as ordered
``[field_name, value]`` pairs into ``ParsedQuestion`` models:

- Recognized fields are assigned in iteration order, so the last
  duplicate wins.
- Unknown fields and malformed pairs are skipped.
- A malformed ``suggested_options`` value decodes to no options; a
  malformed element inside it still yields an empty placeholder Option.

Only a top-level payload that is not an ordered sequence is rejected.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterator, List, Sequence, Tuple

from clarifier.errors import InvalidInput
from clarifier.logic.coercion import coerce_flag, coerce_text, is_sequence
from clarifier.models.clarification import Option, ParsedQuestion, RawRecord
from clarifier.models.field_names import OptionField, QuestionField

logger = logging.getLogger(__name__)


def _iter_pairs(items: Any) -> Iterator[Tuple[Any, Any]]:
    """Yield (name, value) for every well-formed pair in ``items``."""
    if not is_sequence(items):
        return
    for item in items:
        if not is_sequence(item) or len(item) < 2:
            logger.debug("decoder_skip_malformed_pair item=%r", item)
            continue
        yield item[0], item[1]


def decode_option(element: Any) -> Option:
    """Decode one suggested option; non-sequences give an empty Option."""
    fields: Dict[str, str] = {}
    for name, value in _iter_pairs(element):
        if name == OptionField.VALUE:
            fields["value"] = coerce_text(value)
        elif name == OptionField.LABEL:
            fields["label"] = coerce_text(value)
    return Option(**fields)


def decode_options(value: Any) -> Tuple[Option, ...]:
    if not is_sequence(value):
        return ()
    return tuple(decode_option(element) for element in value)


# field name -> (model attribute, converter)
_QUESTION_FIELDS: Dict[str, Tuple[str, Callable[[Any], Any]]] = {
    QuestionField.KEY: ("key", coerce_text),
    QuestionField.QUESTION: ("question", coerce_text),
    QuestionField.ALLOWS_CUSTOM: ("allows_custom", coerce_flag),
    QuestionField.SUGGESTED_OPTIONS: ("suggested_options", decode_options),
}


def decode_question(record: RawRecord) -> ParsedQuestion:
    fields: Dict[str, Any] = {}
    for name, value in _iter_pairs(record):
        handler = _QUESTION_FIELDS.get(name) if isinstance(name, str) else None
        if handler is None:
            logger.debug("decoder_ignore_field name=%r", name)
            continue
        attr, convert = handler
        fields[attr] = convert(value)
    return ParsedQuestion(**fields)


def decode_clarification_questions(records: Sequence[RawRecord]) -> List[ParsedQuestion]:
    """Decode raw clarification records, one question per record in order.

    Raises InvalidInput when ``records`` itself is not a list or tuple.
    """
    if not is_sequence(records):
        raise InvalidInput(
            f"clarification payload must be a list of records, got {type(records).__name__}"
        )
    return [decode_question(record) for record in records]


__all__ = [
    "decode_option",
    "decode_options",
    "decode_question",
    "decode_clarification_questions",
]
