"""Exception hierarchy for impcut."""

from __future__ import annotations


class ImpCutError(Exception):
    """Base class for all impcut errors."""


class InvalidInputError(ImpCutError, ValueError):
    """Raised when caller-provided graph, vertex sets, or budget are malformed."""


class BudgetExceededError(ImpCutError):
    """Raised when the minimum cut is larger than the remaining budget.

    This is an ordinary search outcome: the branch that triggered it is pruned
    and the error never reaches the caller of the enumerator.

    Attributes:
        flow: Flow value found before the search stopped (at least ``budget + 1``).
        budget: Budget that was exceeded.
    """

    def __init__(self, flow: int, budget: int) -> None:
        super().__init__(f"minimum cut exceeds budget: flow={flow} > k={budget}")
        self.flow = flow
        self.budget = budget

    def __reduce__(self):
        return self.__class__, (self.flow, self.budget)


class InternalConsistencyError(ImpCutError, AssertionError):
    """Raised when a search invariant is violated. Indicates a bug."""
