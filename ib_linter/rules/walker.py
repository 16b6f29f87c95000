"""Pre-order traversal shared by every view tree rule.

A node's own violations always precede those of its subviews, and
subviews are visited in document order, so output is deterministic for a
fixed tree.
"""

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

from ..documents import InterfaceBuilderDocument, View, XibDocument

if TYPE_CHECKING:
    from .base import Violation

Visitor = Callable[[View], list["Violation"]]


def root_views(document: InterfaceBuilderDocument) -> Iterator[View]:
    """Roots to walk for a document.

    Xib: every top-level view. Storyboard: the root view of every scene's
    view controller; scenes without either contribute nothing.
    """
    if isinstance(document, XibDocument):
        yield from document.views or ()
        return

    for scene in document.scenes or ():
        controller = scene.view_controller
        if controller is not None and controller.root_view is not None:
            yield controller.root_view


def iter_views(root: View) -> Iterator[View]:
    """Yield ``root`` and all descendants in pre-order."""
    stack = [root]
    while stack:
        view = stack.pop()
        yield view
        stack.extend(reversed(view.subviews))


def walk(root: View, visit: Visitor) -> list["Violation"]:
    """Apply ``visit`` to every node under ``root`` and concatenate."""
    violations: list[Violation] = []
    for view in iter_views(root):
        violations.extend(visit(view))
    return violations


def validate_document(
    document: InterfaceBuilderDocument, visit: Visitor
) -> list["Violation"]:
    """Walk every root view of ``document`` in order."""
    violations: list[Violation] = []
    for root in root_views(document):
        violations.extend(walk(root, visit))
    return violations
