"""
Approximate QFT Builder
=======================

Emits the controlled-rotation / Hadamard network of the approximate quantum
Fourier transform over a register, followed by the bit-reversal swaps.

For a register of n slots (forward addressing, index 0 most significant):

    for i in 0 .. n-1:
        for j in 0 .. i-1:
            if i - j < depth:
                ControlledRotate(control=slot[i], target=slot[j], 1, i - j)
        Hadamard(slot[i])
    Swap(slot[k], slot[n-1-k]) for k < n // 2

depth = n keeps every rotation and gives the exact transform; depth = 1
drops all of them.
"""

import logging
from numbers import Integral
from typing import Iterable, List, Union

from .operations import ControlledRotate, Hadamard, Operation, OperationSequence, Swap
from .register import InvalidArgumentError, RegisterView, Slot, as_register_view, check_distinct_slots

logger = logging.getLogger(__name__)


def validate_depth(n_slots: int, depth: int) -> None:
    """
    Check register length and pruning depth independently.

    Raises
    ------
    InvalidArgumentError
        If the register is empty, or depth is not an integer in [1, n_slots].
    """
    if n_slots < 1:
        raise InvalidArgumentError("register must contain at least one slot")
    if isinstance(depth, bool) or not isinstance(depth, Integral):
        raise InvalidArgumentError(f"depth must be an integer, got {depth!r}")
    if not 1 <= depth <= n_slots:
        raise InvalidArgumentError(
            f"depth must satisfy 1 <= depth <= {n_slots} (register length), got {depth}"
        )


def reverse_register(register: Union[RegisterView, Iterable[Slot]]) -> OperationSequence:
    """
    Swap network reversing the slot order of ``register``.

    Raises InvalidArgumentError if ``register`` repeats a slot.

    Emits floor(n/2) swaps pairing index i with n-1-i; the middle slot of an
    odd-length register is left alone.
    """
    view = as_register_view(register)
    check_distinct_slots(view)
    n = len(view)
    return OperationSequence(Swap(view[i], view[n - 1 - i]) for i in range(n // 2))


def approximate_qft(register: Union[RegisterView, Iterable[Slot]], depth: int) -> OperationSequence:
    """
    Build the approximate QFT on ``register`` with pruning depth ``depth``.

    Parameters
    ----------
    register : RegisterView or Iterable[Slot]
        Slots to transform. A plain iterable is read in forward (big-endian)
        order: element 0 is the most significant slot.
    depth : int
        Rotations between slots whose index gap is >= depth are dropped.
        Must lie in [1, len(register)].

    Returns
    -------
    OperationSequence
        Rotations and Hadamards followed by the endian-fixing swaps.

    Raises
    ------
    InvalidArgumentError
        If the register is empty, repeats a slot, or depth is out of
        range. Nothing is emitted in that case.

    Examples
    --------
    >>> seq = approximate_qft(['q0', 'q1', 'q2'], depth=2)
    >>> seq.count_by_kind()
    {'Hadamard': 3, 'ControlledRotate': 2, 'Swap': 1}
    """
    view = as_register_view(register)
    n = len(view)
    validate_depth(n, depth)
    check_distinct_slots(view)

    ops: List[Operation] = []
    for i in range(n):
        control = view[i]
        for j in range(i):
            gap = i - j
            if gap < depth:
                ops.append(ControlledRotate(frozenset([control]), view[j], 1, gap))
        ops.append(Hadamard(control))

    n_rotations = len(ops) - n
    logger.debug(f"AQFT built: n={n}, depth={depth}, rotations={n_rotations}")

    return OperationSequence(ops) + reverse_register(view)
