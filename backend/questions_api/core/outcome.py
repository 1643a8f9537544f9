"""Outcome — two-armed result of a fallible domain computation.

Invariants:
    - An Outcome is exactly one of Success or Failure
    - Failure always carries a QuestionsApiError (status + message travel with it)

Design Decisions:
    - Return values over raised exceptions for expected failures: the route
      hands the outcome straight to the result mapper, keeping the error path
      identical in shape to the success path
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from questions_api.core.errors import QuestionsApiError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    error: QuestionsApiError


Outcome = Union[Success[T], Failure]
