"""Three-way key comparison for dazzlebst.

Every search path through the tree asks the same question of two keys:
is the target less than, equal to, or greater than the key stored in the
node? Routing that question through one function keeps the tree's
recursive algorithms free of chained ``<``/``==`` checks.
"""

from typing import Any

LESS = -1
EQUAL = 0
GREATER = 1


def compare(target: Any, reference: Any) -> int:
    """Compare two keys.

    Keys must support a total order through ``<`` and ``==``. A key type
    without one is a caller error; the resulting ``TypeError`` propagates.

    Args:
        target: The key being looked for or placed
        reference: The key held by the node being examined

    Returns:
        LESS (-1), EQUAL (0) or GREATER (1)
    """
    if target == reference:
        return EQUAL
    if target < reference:
        return LESS
    return GREATER
