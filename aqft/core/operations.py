"""
Operation Records
=================

Immutable descriptions of the elementary gates emitted by the AQFT builder.

The operation set is closed:

- Rotate(target, numerator, exponent)
- ControlledRotate(controls, target, numerator, exponent)
- Hadamard(target)
- ControlledHadamard(controls, target)
- Swap(a, b)
- ControlledSwap(controls, a, b)

Rotation angles are dyadic fractions of a half turn: the phase applied to
|1> is pi * numerator / 2**exponent. Numerical semantics beyond that belong
to the execution layer.
"""

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Iterator, Tuple, Union

from .register import InvalidArgumentError, Slot


def _freeze_controls(controls: Union[Slot, Iterable[Slot]]) -> FrozenSet[Slot]:
    # Sets, lists and tuples are control collections; anything else is one slot
    if isinstance(controls, (frozenset, set, list, tuple)):
        frozen = frozenset(controls)
    else:
        frozen = frozenset([controls])
    if not frozen:
        raise InvalidArgumentError("controlled operation needs at least one control slot")
    return frozen


@dataclass(frozen=True)
class Rotate:
    """Phase rotation by pi * numerator / 2**exponent on ``target``."""
    target: Slot
    numerator: int
    exponent: int

    @property
    def angle(self) -> float:
        return math.pi * self.numerator / (2 ** self.exponent)

    def slots(self) -> Tuple[Slot, ...]:
        return (self.target,)


@dataclass(frozen=True)
class ControlledRotate:
    """
    Rotation on ``target`` conditioned on every slot in ``controls``.

    ``controls`` is stored as a frozenset, so the order in which controls were
    added never affects equality. A set, list or tuple is read as a collection
    of controls; any other value is taken as a single control slot.
    """
    controls: FrozenSet[Slot]
    target: Slot
    numerator: int
    exponent: int

    def __post_init__(self):
        object.__setattr__(self, 'controls', _freeze_controls(self.controls))

    @property
    def control(self) -> Slot:
        """The control slot of a singly controlled rotation."""
        if len(self.controls) != 1:
            raise AttributeError(
                f"rotation has {len(self.controls)} controls; use .controls instead"
            )
        return next(iter(self.controls))

    @property
    def angle(self) -> float:
        return math.pi * self.numerator / (2 ** self.exponent)

    def slots(self) -> Tuple[Slot, ...]:
        return tuple(self.controls) + (self.target,)


@dataclass(frozen=True)
class Hadamard:
    target: Slot

    def slots(self) -> Tuple[Slot, ...]:
        return (self.target,)


@dataclass(frozen=True)
class ControlledHadamard:
    controls: FrozenSet[Slot]
    target: Slot

    def __post_init__(self):
        object.__setattr__(self, 'controls', _freeze_controls(self.controls))

    def slots(self) -> Tuple[Slot, ...]:
        return tuple(self.controls) + (self.target,)


@dataclass(frozen=True)
class Swap:
    a: Slot
    b: Slot

    def slots(self) -> Tuple[Slot, ...]:
        return (self.a, self.b)


@dataclass(frozen=True)
class ControlledSwap:
    controls: FrozenSet[Slot]
    a: Slot
    b: Slot

    def __post_init__(self):
        object.__setattr__(self, 'controls', _freeze_controls(self.controls))

    def slots(self) -> Tuple[Slot, ...]:
        return tuple(self.controls) + (self.a, self.b)


Operation = Union[Rotate, ControlledRotate, Hadamard, ControlledHadamard, Swap, ControlledSwap]

OPERATION_TYPES = (Rotate, ControlledRotate, Hadamard, ControlledHadamard, Swap, ControlledSwap)


@dataclass(frozen=True)
class OperationSequence:
    """
    Ordered, immutable list of operations. Execution order is list order.

    Transformations never mutate a sequence; they return new ones.

    Parameters
    ----------
    operations : Iterable[Operation]
        Operations in execution order.

    Examples
    --------
    >>> seq = OperationSequence([Hadamard('q0'), Swap('q0', 'q1')])
    >>> len(seq), seq[0]
    (2, Hadamard(target='q0'))
    """
    operations: Tuple[Operation, ...] = field(default_factory=tuple)

    def __post_init__(self):
        ops = tuple(self.operations)
        for op in ops:
            if not isinstance(op, OPERATION_TYPES):
                raise TypeError(f"Unsupported operation type: {type(op).__name__}")
        object.__setattr__(self, 'operations', ops)

    def __len__(self) -> int:
        return len(self.operations)

    def __iter__(self) -> Iterator[Operation]:
        return iter(self.operations)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return OperationSequence(self.operations[index])
        return self.operations[index]

    def __add__(self, other: 'OperationSequence') -> 'OperationSequence':
        if not isinstance(other, OperationSequence):
            return NotImplemented
        return OperationSequence(self.operations + other.operations)

    def slots(self) -> FrozenSet[Slot]:
        """Every slot referenced by any operation in the sequence."""
        referenced = set()
        for op in self.operations:
            referenced.update(op.slots())
        return frozenset(referenced)

    def count_by_kind(self) -> Dict[str, int]:
        """Number of operations per operation class name."""
        return dict(Counter(type(op).__name__ for op in self.operations))
