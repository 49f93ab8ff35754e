"""
Library-wide settings.

Dijkstra on negative weights and Floyd-Warshall on negative cycles produce
meaningless results. The precondition policy decides whether engines check
for these inputs up front and raise, or skip the checks.
"""

from enum import Enum
from typing import Optional


class PreconditionPolicy(Enum):
    """
    Global precondition policy.

    REJECT: scan the input and raise before computing on invalid graphs.
    UNCHECKED: skip the scan; results on invalid graphs are undefined.
    """

    REJECT = "reject"
    UNCHECKED = "unchecked"


# Global policy used by all engines; individual calls may override it.
PRECONDITION_POLICY: PreconditionPolicy = PreconditionPolicy.REJECT


def set_precondition_policy(policy: PreconditionPolicy) -> None:
    """Set the global precondition policy for all engines."""
    global PRECONDITION_POLICY
    PRECONDITION_POLICY = PreconditionPolicy(policy)


def get_precondition_policy() -> PreconditionPolicy:
    return PRECONDITION_POLICY


def resolve_policy(policy: Optional[PreconditionPolicy]) -> PreconditionPolicy:
    """Explicit per-call policy wins over the global one."""
    if policy is None:
        return PRECONDITION_POLICY
    return PreconditionPolicy(policy)
