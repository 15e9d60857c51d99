"""Deferred named-placeholder formatting for translated templates.

Translated strings keep their placeholders until display time, when the
caller binds already-localized values to them:

    >>> template = localizer.ngettext("{count} file", "{count} files", n)
    >>> FormatBuilder.of(template).arg("count", format_int(n, locale)).format()

Template syntax:
    {name}  Placeholder. name is any non-empty text without braces;
            whitespace is significant ("{ count }" is the name " count ").
    {{      Literal "{".
    }}      Literal "}".

A lone "{" or "}", an empty "{}" and nested braces make a template
malformed.

Failure policy:
    format()      Never raises. Bound placeholders are substituted, unbound
                  ones are rendered as "{name}". A malformed template is
                  returned verbatim.
    try_format()  Raises FormatError for unbound placeholders (listing them
                  in FormatError.missing) and for malformed templates.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import NoReturn, Self

from getprose.constants import MAX_TEMPLATE_CACHE_SIZE, PLACEHOLDER_CLOSE, PLACEHOLDER_OPEN
from getprose.diagnostics import ErrorTemplate, FormatError

__all__ = [
    "FormatBuilder",
    "Placeholder",
    "parse_template",
    "to_format",
]

logger = logging.getLogger(__name__)

# Alternation order matters: escapes win over placeholders at the same offset.
_TOKEN_PATTERN = re.compile(r"\{\{|\}\}|\{([^{}]*)\}|[{}]")


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A {name} placeholder in a parsed template."""

    name: str

    def __str__(self) -> str:
        return f"{PLACEHOLDER_OPEN}{self.name}{PLACEHOLDER_CLOSE}"


type Segment = str | Placeholder
"""Literal text (escapes already resolved) or a placeholder."""


@functools.lru_cache(maxsize=MAX_TEMPLATE_CACHE_SIZE)
def parse_template(template: str) -> tuple[Segment, ...]:
    """Split a template into literal text and placeholders.

    Adjacent literal text is merged into one segment; empty literals are
    dropped.

    Args:
        template: Template text

    Returns:
        Segments in template order

    Raises:
        FormatError: If the template is malformed (missing is empty)

    Example:
        >>> parse_template("{{{count}}} of {total}")
        ('{', Placeholder(name='count'), '} of ', Placeholder(name='total'))
    """
    segments: list[Segment] = []
    literal: list[str] = []
    position = 0

    for match in _TOKEN_PATTERN.finditer(template):
        literal.append(template[position : match.start()])
        token = match.group(0)
        name = match.group(1)

        if token == "{{":
            literal.append(PLACEHOLDER_OPEN)
        elif token == "}}":
            literal.append(PLACEHOLDER_CLOSE)
        elif name is not None:
            if not name:
                _raise_malformed(template, match.start(), "empty placeholder")
            if text := "".join(literal):
                segments.append(text)
            literal.clear()
            segments.append(Placeholder(name))
        else:
            _raise_malformed(template, match.start(), f"unmatched '{token}'")

        position = match.end()

    literal.append(template[position:])
    if text := "".join(literal):
        segments.append(text)
    return tuple(segments)


def _raise_malformed(template: str, position: int, reason: str) -> NoReturn:
    diagnostic = ErrorTemplate.template_malformed(template, position, reason)
    raise FormatError(diagnostic, template=template)


class FormatBuilder:
    """Accumulates placeholder values for one template.

    Values are stored as display strings: localize numbers with format_int
    or format_f64 before binding them. Binding a name twice keeps the last
    value.

    Example:
        >>> FormatBuilder.of("{count} of {total}").args({"count": 3, "total": "1.024"}).format()
        '3 of 1.024'
        >>> FormatBuilder.of("Hello, {name}!").format()
        'Hello, {name}!'
    """

    __slots__ = ("_args", "_template")

    def __init__(self, template: str) -> None:
        self._template = template
        self._args: dict[str, str] = {}

    @classmethod
    def of(cls, template: str) -> Self:
        """Start formatting template."""
        return cls(template)

    @property
    def template(self) -> str:
        """The unformatted template."""
        return self._template

    @property
    def arguments(self) -> Mapping[str, str]:
        """Read-only view of the bound values."""
        return MappingProxyType(self._args)

    def arg(self, name: str, value: object) -> Self:
        """Bind str(value) to placeholder name."""
        self._args[name] = str(value)
        return self

    def args(self, values: Mapping[str, object] | None = None, /, **kwargs: object) -> Self:
        """Bind several values at once, from a mapping and/or keywords."""
        if values is not None:
            for name, value in values.items():
                self.arg(name, value)
        for name, value in kwargs.items():
            self.arg(name, value)
        return self

    def try_format(self) -> str:
        """Substitute every placeholder.

        Returns:
            Formatted string

        Raises:
            FormatError: If a placeholder is unbound or the template is malformed
        """
        segments = parse_template(self._template)
        missing = self._missing(segments)
        if missing:
            diagnostic = ErrorTemplate.placeholder_unbound(missing)
            raise FormatError(diagnostic, template=self._template, missing=missing)
        return "".join(
            segment if isinstance(segment, str) else self._args[segment.name]
            for segment in segments
        )

    def format(self) -> str:
        """Substitute bound placeholders, leaving unbound ones in place.

        Never raises: a malformed template is returned unchanged.
        """
        try:
            segments = parse_template(self._template)
        except FormatError as e:
            logger.warning("Template returned unformatted: %s", e.diagnostic or e)
            return self._template

        missing = self._missing(segments)
        if missing:
            logger.warning(
                "Unbound placeholder(s) %s left in template %r", ", ".join(missing), self._template
            )
        return "".join(
            segment if isinstance(segment, str) else self._args.get(segment.name, str(segment))
            for segment in segments
        )

    def _missing(self, segments: tuple[Segment, ...]) -> tuple[str, ...]:
        names = (
            segment.name
            for segment in segments
            if isinstance(segment, Placeholder) and segment.name not in self._args
        )
        # dict.fromkeys keeps template order while dropping repeats
        return tuple(dict.fromkeys(names))

    def __repr__(self) -> str:
        return f"FormatBuilder(template={self._template!r}, args={self._args!r})"


def to_format(template: str) -> FormatBuilder:
    """Shorthand for FormatBuilder.of(template)."""
    return FormatBuilder.of(template)
