"""Weight and label extraction — bridge between user elements and the graph.

A graph never inspects its elements on its own.  Whatever weight or label an
element carries is read by a plain callable injected at construction time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from numbers import Real
from typing import Any

logger = logging.getLogger(__name__)

WeightExtractor = Callable[[Any], float]
LabelExtractor = Callable[[Any], str]

_MISSING = object()


def default_weight(element: Any) -> float:
    """Every edge weighs ``1.0``."""
    return 1.0


def constant_weight(value: float) -> WeightExtractor:
    """Return an extractor that gives every edge the same *value*."""
    weight = float(value)

    def extract(element: Any) -> float:
        return weight

    return extract


def attribute_weight(name: str = "weight", default: float = 1.0) -> WeightExtractor:
    """Return an extractor reading a numeric *name* off the element.

    Looks for a mapping key, then an attribute (calling it when it is a
    zero-argument callable).  Anything that is not a real number, including
    ``bool``, falls back to *default*.
    """

    def extract(element: Any) -> float:
        value = _lookup(element, name)
        if isinstance(value, Real) and not isinstance(value, bool):
            return float(value)
        return default

    return extract


def default_label(element: Any) -> str:
    """Label an element with its ``str()``."""
    return str(element)


def attribute_label(name: str = "label") -> LabelExtractor:
    """Return an extractor reading *name* off the element, else ``str(element)``."""

    def extract(element: Any) -> str:
        value = _lookup(element, name)
        if value is _MISSING or value is None:
            return str(element)
        return str(value)

    return extract


def _lookup(element: Any, name: str) -> Any:
    """Resolve *name* on *element* as a key or attribute, or ``_MISSING``."""
    try:
        if isinstance(element, Mapping):
            return element.get(name, _MISSING)
        value = getattr(element, name, _MISSING)
        if value is not _MISSING and callable(value):
            value = value()
        return value
    except Exception:
        logger.warning("Failed to read %r from %r", name, element, exc_info=True)
        return _MISSING
