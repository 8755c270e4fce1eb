"""
Descriptor Clauses
==================
Splits a descriptor such as::

    (Cylinder_x: x=1; y=0; z=0; r=3; l=1; z<0.5)

into its type name and clauses, tags every clause with a ``ClauseKind`` and
folds the clauses into an immutable ``ParsedAttributes`` value.

Classification is done by an ordered table of anchored patterns *before* any
value is evaluated. The order matters because keywords overlap: ``dx=`` must
win over ``x=``, ``r=`` over ``r<``, and ``a_x(...)`` must never be read as an
``x`` bound.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
import logging
import re
from typing import List, Optional, Pattern, Tuple

from forbildshapes.errors import MalformedDescriptorError
from forbildshapes.model.attributes import ParsedAttributes
from forbildshapes.parser.bounding import translate_axis_bound, translate_radial_bound
from forbildshapes.parser.expressions import evaluate_scalar, evaluate_vector

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class ClauseKind(StrEnum):
    ORIGIN = "origin"
    HALF_EXTENT = "half_extent"
    RADIUS = "radius"
    LENGTH = "length"
    AXIS = "axis"
    RADIAL_BOUND = "radial_bound"
    FRAME = "frame"
    AXIS_BOUND = "axis_bound"
    UNKNOWN = "unknown"


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class RawDescriptor:
    """The descriptor split at its first ``:``."""
    type_name: str
    properties: str

    @classmethod
    def parse(cls, text: str) -> RawDescriptor:
        """
        Strip one surrounding ``(...)`` or ``[...]`` pair and split off the header.

        Raises:
            MalformedDescriptorError: if there is no ``:``, no type name or no properties.
        """
        expression = text.strip()
        if len(expression) >= 2 and (expression[0], expression[-1]) in (("(", ")"), ("[", "]")):
            expression = expression[1:-1].strip()

        head, sep, tail = expression.partition(":")
        if not sep:
            raise MalformedDescriptorError(f"Descriptor '{text.strip()}' has no 'TypeName:' header.")
        type_name = head.strip()
        properties = tail.strip()
        if not type_name:
            raise MalformedDescriptorError(f"Descriptor '{text.strip()}' has an empty type name.")
        if not properties:
            raise MalformedDescriptorError(f"Descriptor '{text.strip()}' has no properties.")
        return cls(type_name=type_name, properties=properties)


@dataclass(frozen=True)
class Clause:
    """One tagged clause. ``key``, ``operator`` and ``value`` depend on ``kind``."""
    kind: ClauseKind
    text: str
    key: str = ""
    operator: str = ""
    value: str = ""


# ------------------------------------------------------------------------------
# Tokenizer
# ------------------------------------------------------------------------------
_RULES: Tuple[Tuple[ClauseKind, Pattern[str]], ...] = (
    (ClauseKind.ORIGIN, re.compile(r"^(?P<key>[xyz])\s*(?P<op>=)\s*(?P<value>.*)$")),
    (ClauseKind.HALF_EXTENT, re.compile(r"^(?P<key>d[xy])\s*(?P<op>=)\s*(?P<value>.*)$")),
    (ClauseKind.RADIUS, re.compile(r"^(?P<key>r)\s*(?P<op>=)\s*(?P<value>[^<>]*)$")),
    (ClauseKind.LENGTH, re.compile(r"^(?P<key>l)\s*(?P<op>=)\s*(?P<value>.*)$")),
    (ClauseKind.AXIS, re.compile(r"^(?P<key>axis)\s*=?\s*(?P<value>\(.*\))$")),
    (ClauseKind.RADIAL_BOUND, re.compile(r"^(?P<key>r)\b(?=[^<>]*(?P<op>[<>]=?))(?P<value>.*)$")),
    (ClauseKind.FRAME, re.compile(r"^(?P<key>a_[xy])\s*=?\s*(?P<value>\(.*\))$")),
    (ClauseKind.AXIS_BOUND, re.compile(r"^(?P<key>[xyz])\s*(?P<op>[<>]=?)\s*(?P<value>.+)$")),
)


def split_clauses(properties: str) -> List[str]:
    """Split on ``;``, trim, and drop empty pieces (e.g. from a trailing ``;``)."""
    return [part.strip() for part in properties.split(";") if part.strip()]


def classify_clause(text: str) -> Clause:
    """Tag one trimmed clause; the first matching rule wins."""
    for kind, pattern in _RULES:
        match = pattern.match(text)
        if match is None:
            continue
        groups = match.groupdict()
        value = text if kind == ClauseKind.RADIAL_BOUND else (groups.get("value") or "").strip()
        return Clause(
            kind=kind,
            text=text,
            key=groups.get("key") or "",
            operator=groups.get("op") or "",
            value=value,
        )
    return Clause(kind=ClauseKind.UNKNOWN, text=text)


def tokenize(properties: str) -> List[Clause]:
    return [classify_clause(part) for part in split_clauses(properties)]


# ------------------------------------------------------------------------------
# Interpretation
# ------------------------------------------------------------------------------
_ORIGIN_INDEX = {"x": 0, "y": 1, "z": 2}


def interpret_clause(attributes: ParsedAttributes, clause: Clause) -> ParsedAttributes:
    """
    Returns ``attributes`` updated by one clause.

    Unknown clauses are returned unchanged; the caller decides whether to
    tolerate them.
    """
    match clause.kind:
        case ClauseKind.ORIGIN:
            value = evaluate_scalar(clause.value)
            origin = attributes.origin.with_component(_ORIGIN_INDEX[clause.key], value)
            return replace(attributes, origin=origin)
        case ClauseKind.HALF_EXTENT:
            return replace(attributes, **{clause.key: evaluate_scalar(clause.value)})
        case ClauseKind.RADIUS:
            radius = evaluate_scalar(clause.value)
            return replace(attributes, dx=radius, dy=radius)
        case ClauseKind.LENGTH:
            return replace(attributes, dz=evaluate_scalar(clause.value))
        case ClauseKind.AXIS:
            return replace(attributes, axis=evaluate_vector(clause.value))
        case ClauseKind.FRAME:
            return replace(attributes, **{clause.key: evaluate_vector(clause.value)})
        case ClauseKind.RADIAL_BOUND:
            plane = translate_radial_bound(clause.value)
            return replace(attributes, bounding_planes=attributes.bounding_planes + (plane,))
        case ClauseKind.AXIS_BOUND:
            plane = translate_axis_bound(clause.key, clause.operator, clause.value)
            return replace(attributes, bounding_planes=attributes.bounding_planes + (plane,))
        case _:
            return attributes


def interpret_clauses(
    properties: str,
    initial: Optional[ParsedAttributes] = None,
    *,
    strict: bool = False
) -> ParsedAttributes:
    """
    Fold every clause of a property section into ``ParsedAttributes``.

    Args:
        properties: Text after the descriptor's first ``:``.
        initial: Starting attributes (e.g. with the type-suffix axis already set).
        strict: Raise on clauses the grammar does not know instead of skipping them.

    Raises:
        MalformedDescriptorError: for an unknown clause when ``strict`` is set.
        EvaluationError: when a clause value cannot be evaluated.
    """
    attributes = initial if initial is not None else ParsedAttributes()
    for clause in tokenize(properties):
        if clause.kind == ClauseKind.UNKNOWN:
            if strict:
                raise MalformedDescriptorError(f"Unknown clause '{clause.text}'.")
            logger.debug(f"Skipping unknown clause '{clause.text}'")
            continue
        attributes = interpret_clause(attributes, clause)
    return attributes
