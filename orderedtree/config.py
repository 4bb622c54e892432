"""Configuration system for OrderedTree.

This module defines how users specify traversal orders, whether walks use
an explicit stack or natural recursion, and how traversals are rendered
as text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from .errors import ConfigurationError


class TraversalOrder(Enum):
    """Order in which a traversal visits nodes."""
    IN_ORDER = "in"                  # Left, node, right (ascending keys)
    PRE_ORDER = "pre"                # Node, left, right
    POST_ORDER = "post"              # Left, right, node
    REVERSE_IN_ORDER = "reverse"     # Right, node, left (descending keys)
    LEVEL_ORDER = "level"            # Level by level from the root


class TraversalMode(Enum):
    """How depth-first walks are executed.

    ITERATIVE keeps its own stack, so a degenerate chain produced by sorted
    insertions cannot exhaust the interpreter's recursion limit.
    """
    ITERATIVE = "iterative"
    RECURSIVE = "recursive"


_ORDER_ALIASES = {
    'in': TraversalOrder.IN_ORDER,
    'inorder': TraversalOrder.IN_ORDER,
    'in_order': TraversalOrder.IN_ORDER,
    'pre': TraversalOrder.PRE_ORDER,
    'preorder': TraversalOrder.PRE_ORDER,
    'pre_order': TraversalOrder.PRE_ORDER,
    'post': TraversalOrder.POST_ORDER,
    'postorder': TraversalOrder.POST_ORDER,
    'post_order': TraversalOrder.POST_ORDER,
    'reverse': TraversalOrder.REVERSE_IN_ORDER,
    'reverse_in_order': TraversalOrder.REVERSE_IN_ORDER,
    'desc': TraversalOrder.REVERSE_IN_ORDER,
    'level': TraversalOrder.LEVEL_ORDER,
    'level_order': TraversalOrder.LEVEL_ORDER,
    'bfs': TraversalOrder.LEVEL_ORDER,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Convert a traversal order name or enum member to TraversalOrder.

    Args:
        order: TraversalOrder member or one of its names/aliases
            (case-insensitive, dashes allowed)

    Returns:
        The matching TraversalOrder

    Raises:
        ConfigurationError: If the name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order
    if not isinstance(order, str):
        raise ConfigurationError(f"Traversal order must be a string or TraversalOrder, got {order!r}")

    key = order.strip().lower().replace('-', '_')
    if key not in _ORDER_ALIASES:
        raise ConfigurationError(
            f"Unknown traversal order: {order}. "
            f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
        )
    return _ORDER_ALIASES[key]


def parse_mode(mode: Union[TraversalMode, str]) -> TraversalMode:
    """Convert a mode name or enum member to TraversalMode."""
    if isinstance(mode, TraversalMode):
        return mode
    try:
        return TraversalMode(str(mode).strip().lower())
    except ValueError:
        raise ConfigurationError(
            f"Unknown traversal mode: {mode}. "
            f"Choose from: {', '.join(m.value for m in TraversalMode)}"
        ) from None


@dataclass
class TreeConfig:
    """Complete configuration for an OrderedTree.

    Controls how traversals and order-statistic queries walk the tree and
    how a traversal is rendered as text.
    """

    # Walk execution
    mode: TraversalMode = TraversalMode.ITERATIVE    # or its name

    # Order used by traverse()/render() when none is given
    default_order: TraversalOrder = TraversalOrder.IN_ORDER    # or a name/alias

    # Textual rendering
    separator: str = " "
    trailing_separator: bool = False

    def __post_init__(self):
        # Accept the same names as create_traverser; anything unrecognised is
        # left in place for validate() to report.
        if isinstance(self.mode, str):
            try:
                self.mode = parse_mode(self.mode)
            except ConfigurationError:
                pass
        if isinstance(self.default_order, str):
            try:
                self.default_order = parse_order(self.default_order)
            except ConfigurationError:
                pass

    @classmethod
    def recursive(cls) -> 'TreeConfig':
        """Create config that walks the tree with natural recursion.

        Only suitable for trees whose height stays well below
        ``sys.getrecursionlimit()``.
        """
        return cls(mode=TraversalMode.RECURSIVE)

    @classmethod
    def legacy_output(cls) -> 'TreeConfig':
        """Create config whose rendering ends every key with a separator."""
        return cls(trailing_separator=True)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.mode, TraversalMode):
            errors.append(f"mode must be a TraversalMode, got {self.mode!r}")

        if not isinstance(self.default_order, TraversalOrder):
            errors.append(f"default_order must be a TraversalOrder, got {self.default_order!r}")

        if not isinstance(self.separator, str):
            errors.append("separator must be a string")
        elif not self.separator:
            errors.append("separator cannot be empty")
        elif any(ch.isdigit() or ch == '-' for ch in self.separator):
            errors.append("separator cannot contain digits or '-'")

        return errors
