"""Configuration system for dazzlebst.

This module defines how users choose default traversal behaviour, whether
the tree reports ignored operations, and how random demo/test input is
generated.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union


class ConfigurationError(ValueError):
    """Raised when a configuration fails validation."""
    pass


class TraversalOrder(Enum):
    """Order in which a traversal visits the nodes of the tree.

    Different orders suit different jobs.
    """
    LEVEL_ORDER = "level"   # Breadth-first, level by level
    PRE_ORDER = "pre"       # Node before its subtrees (copying a tree)
    IN_ORDER = "in"         # Left, node, right - ascending keys
    POST_ORDER = "post"     # Subtrees before node (tearing a tree down)


_ORDER_ALIASES = {
    'level': TraversalOrder.LEVEL_ORDER,
    'level_order': TraversalOrder.LEVEL_ORDER,
    'bfs': TraversalOrder.LEVEL_ORDER,
    'breadth_first': TraversalOrder.LEVEL_ORDER,
    'pre': TraversalOrder.PRE_ORDER,
    'preorder': TraversalOrder.PRE_ORDER,
    'pre_order': TraversalOrder.PRE_ORDER,
    'in': TraversalOrder.IN_ORDER,
    'inorder': TraversalOrder.IN_ORDER,
    'in_order': TraversalOrder.IN_ORDER,
    'post': TraversalOrder.POST_ORDER,
    'postorder': TraversalOrder.POST_ORDER,
    'post_order': TraversalOrder.POST_ORDER,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from a string or enum.

    Args:
        order: Order as enum or one of its string aliases

    Returns:
        TraversalOrder enum value

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower in _ORDER_ALIASES:
        return _ORDER_ALIASES[order_lower]

    raise ValueError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
    )


@dataclass
class TreeConfig:
    """Behavioural settings for a Tree.

    Attributes:
        default_order: Order used by iteration and traverse() when none is given
        verbose: If True, print a warning to stderr whenever an insert or
            delete turns out to be a no-op, or construction drops duplicates
    """

    default_order: TraversalOrder = TraversalOrder.IN_ORDER
    verbose: bool = False

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not isinstance(self.default_order, TraversalOrder):
            errors.append("default_order must be a TraversalOrder")
        return errors


@dataclass
class RandomInputConfig:
    """Settings for generating random keys for demos and tests.

    The defaults draw 15 integers from 1..100 inclusive. Duplicates are
    allowed in the output; the Tree removes them on construction.
    """

    size: int = 15                # How many values to draw
    low: int = 1                  # Smallest possible value
    high: int = 100               # Largest possible value (inclusive)
    seed: Optional[int] = None    # Seed for reproducible input

    @classmethod
    def small(cls, seed: Optional[int] = None) -> 'RandomInputConfig':
        """Create config for a handful of keys, easy to eyeball when printed."""
        return cls(size=7, low=1, high=20, seed=seed)

    @classmethod
    def large(cls, size: int = 10_000, seed: Optional[int] = None) -> 'RandomInputConfig':
        """Create config for a large key set with few collisions.

        Args:
            size: How many values to draw
            seed: Seed for reproducible input

        Returns:
            RandomInputConfig spanning ten times as many values as drawn
        """
        return cls(size=size, low=0, high=size * 10, seed=seed)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.size < 0:
            errors.append("size cannot be negative")

        if self.low > self.high:
            errors.append("low cannot be greater than high")

        return errors


def ensure_valid(config) -> None:
    """Raise ConfigurationError if ``config.validate()`` reports problems."""
    errors = config.validate()
    if errors:
        raise ConfigurationError(
            f"Invalid configuration: {'; '.join(errors)}"
        )
