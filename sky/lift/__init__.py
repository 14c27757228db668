"""
Lifting helpers.

Move plain functions into the Result world:

    from sky import lift as L

    safe_parse = L.noraise(json.loads)
    bump = L.lift_ok(lambda n: n + 1)
    positive_sqrt = L.reject_if(math.sqrt, lambda x: x >= 0)
"""

from .branch import apply_if, reject_if
from .safe import lift_ok, noraise, noraise_async

__all__ = (
    # Safe
    "noraise",
    "noraise_async",
    "lift_ok",
    # Branch
    "reject_if",
    "apply_if",
)
