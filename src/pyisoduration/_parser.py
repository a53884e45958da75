"""Lark grammar and parser for ISO 8601 duration strings."""

from __future__ import annotations

import logging

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from pyisoduration._constants import MAX_INPUT_LENGTH
from pyisoduration._errors import ERR_MSG_INVALID_FORMAT, InvalidFormatError
from pyisoduration._types import Component, Magnitude

logger = logging.getLogger(__name__)

# Every component is optional in the grammar; the "at least one component"
# and "T needs a time component" rules are enforced after parsing.
DURATION_GRAMMAR = r"""
    start: "P" date_part time_part?

    date_part: years? months? weeks? days?
    time_part: "T" hours? minutes? seconds?

    years: NUMBER "Y"
    months: NUMBER "M"
    weeks: NUMBER "W"
    days: NUMBER "D"
    hours: NUMBER "H"
    minutes: NUMBER "M"
    seconds: NUMBER "S"

    NUMBER: /[0-9]+(?:[.,][0-9]+)?/
"""

_parser = Lark(DURATION_GRAMMAR, parser="lalr")


def _magnitude(token: Token) -> Magnitude:
    """Convert a NUMBER token to int, or float when it carries a fraction."""
    text = str(token).replace(",", ".")
    if "." in text:
        return float(text)
    return int(text)


class _ComponentCollector(Transformer):
    """Collects (component, magnitude) pairs from the parse tree."""

    def start(self, children: list) -> tuple[list, list | None]:
        date_part = children[0]
        time_part = children[1] if len(children) > 1 else None
        return date_part, time_part

    def date_part(self, children: list) -> list:
        return list(children)

    def time_part(self, children: list) -> list:
        return list(children)

    def years(self, children: list) -> tuple[Component, Magnitude]:
        return Component.YEARS, _magnitude(children[0])

    def months(self, children: list) -> tuple[Component, Magnitude]:
        return Component.MONTHS, _magnitude(children[0])

    def weeks(self, children: list) -> tuple[Component, Magnitude]:
        return Component.WEEKS, _magnitude(children[0])

    def days(self, children: list) -> tuple[Component, Magnitude]:
        return Component.DAYS, _magnitude(children[0])

    def hours(self, children: list) -> tuple[Component, Magnitude]:
        return Component.HOURS, _magnitude(children[0])

    def minutes(self, children: list) -> tuple[Component, Magnitude]:
        return Component.MINUTES, _magnitude(children[0])

    def seconds(self, children: list) -> tuple[Component, Magnitude]:
        return Component.SECONDS, _magnitude(children[0])


_collector = _ComponentCollector()


def parse_components(text: str) -> dict[Component, Magnitude]:
    """Parse an ISO 8601 duration string into its present components.

    The returned dict is ordered Y, M, W, D, H, M, S and contains only the
    components written in ``text``; an explicit zero is kept.

    Raises:
        InvalidFormatError: If ``text`` does not match the duration grammar.
    """
    if len(text) > MAX_INPUT_LENGTH:
        raise InvalidFormatError(
            ERR_MSG_INVALID_FORMAT,
            f"duration string length {len(text)} exceeds limit {MAX_INPUT_LENGTH}",
        )

    try:
        tree = _parser.parse(text)
    except LarkError as exc:
        raise InvalidFormatError(
            ERR_MSG_INVALID_FORMAT,
            f"cannot parse duration {text!r}: {exc}",
            wrapped=exc,
        ) from exc

    date_part, time_part = _collector.transform(tree)
    if time_part is not None and not time_part:
        raise InvalidFormatError(
            ERR_MSG_INVALID_FORMAT,
            f"duration {text!r} has a 'T' separator but no time components",
        )

    components = dict(date_part + (time_part or []))
    if not components:
        raise InvalidFormatError(
            ERR_MSG_INVALID_FORMAT,
            f"duration {text!r} has no components",
        )

    logger.debug("parsed duration %r into %d component(s)", text, len(components))
    return components
