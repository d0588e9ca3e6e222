"""Type definitions for dependency comparison."""

from typing import Any, Callable, Literal, Sequence, Tuple, Union

# An ordered list of tracked values captured at one evaluation point.
DependencyList = Sequence[Any]

# A captured (frozen) dependency list.
FrozenDependencies = Tuple[Any, ...]

EqualityFn = Callable[[Any, Any], bool]

# Either an equality function or the name of a registered strategy.
EqualityLike = Union[EqualityFn, str, None]

ChangeReason = Literal["initial", "length", "value", "unchanged"]
