"""Uniform invocation protocol for column visitors.

Both clustering engines are visitors: they are prepared, computed over a
bounding index and a column, finalized, and then queried. ``visit`` runs
that sequence for any object with the right methods; no base class is
involved.
"""

from typing import Any, Protocol, Sequence, Sized


class Visitor(Protocol):
    """Structural type of a computational object applied to one column."""

    def pre(self) -> None: ...

    def compute(self, index: Sized, column: Sequence) -> None: ...

    def post(self) -> None: ...

    def get_result(self) -> Any: ...


def visit(visitor: Visitor, index: Sized, column: Sequence) -> Any:
    """Apply ``visitor`` to ``column`` and return its result.

    Args:
        visitor: Object implementing the visitor protocol.
        index: Bounding index; its length caps the number of points.
        column: Column of values.

    Returns:
        Whatever ``visitor.get_result()`` returns after the run.
    """
    visitor.pre()
    visitor.compute(index, column)
    visitor.post()
    return visitor.get_result()
