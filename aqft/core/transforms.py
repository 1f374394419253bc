"""
QFT Variants
============

Entry points derived from the approximate builder, plus the two sequence
transformations every variant supports:

- exact_qft: builder at maximal depth
- little_endian_qft: exact transform on the reversed view of a register
- adjoint: inverse sequence (reverse order, negated rotation numerators)
- controlled: add one extra control slot to every operation
- build_qft / tensor_qft: configuration-driven entry points

None of these re-derive the rotation/Hadamard network; they all delegate to
``approximate_qft`` or rewrite its output.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

from .builder import approximate_qft
from .operations import (
    ControlledHadamard,
    ControlledRotate,
    ControlledSwap,
    Hadamard,
    Operation,
    OperationSequence,
    Rotate,
    Swap,
)
from .register import InvalidArgumentError, RegisterView, Slot, as_register_view

logger = logging.getLogger(__name__)

RegisterLike = Union[RegisterView, Iterable[Slot]]


@dataclass
class QFTConfig:
    """Configuration for QFT construction."""
    depth: Optional[int] = None     # None = exact, otherwise pruning depth
    inverse: bool = False           # Emit the adjoint sequence
    little_endian: bool = False     # Read the register in reversed order


# ============================================================================
# Entry Points
# ============================================================================

def exact_qft(register: RegisterLike) -> OperationSequence:
    """Exact QFT: the approximate builder with no rotation pruned."""
    view = as_register_view(register)
    return approximate_qft(view, len(view))


def little_endian_qft(register: RegisterLike) -> OperationSequence:
    """
    Exact QFT on a register whose index 0 is the least significant slot.

    The register is reinterpreted through the reversed view and every slot
    reference goes through that view. For ``register = range(n)`` the result
    matches qiskit's qubit ordering, where qubit 0 is the least significant.
    """
    return exact_qft(as_register_view(register).reversed_view())


# ============================================================================
# Sequence Transformations
# ============================================================================

def _invert(op: Operation) -> Operation:
    if isinstance(op, Rotate):
        return Rotate(op.target, -op.numerator, op.exponent)
    if isinstance(op, ControlledRotate):
        return ControlledRotate(op.controls, op.target, -op.numerator, op.exponent)
    if isinstance(op, (Hadamard, ControlledHadamard, Swap, ControlledSwap)):
        return op
    raise TypeError(f"Unsupported operation type: {type(op).__name__}")


def adjoint(sequence: OperationSequence) -> OperationSequence:
    """
    Inverse of ``sequence``.

    Order is fully reversed and every rotation numerator negated. Hadamards
    and swaps (controlled or not) are self-inverse and pass through.
    ``adjoint(adjoint(s)) == s`` holds element for element.
    """
    return OperationSequence(_invert(op) for op in reversed(sequence.operations))


def _lift(op: Operation, control: Slot) -> Operation:
    if isinstance(op, Rotate):
        return ControlledRotate(frozenset([control]), op.target, op.numerator, op.exponent)
    if isinstance(op, ControlledRotate):
        return ControlledRotate(op.controls | {control}, op.target, op.numerator, op.exponent)
    if isinstance(op, Hadamard):
        return ControlledHadamard(frozenset([control]), op.target)
    if isinstance(op, ControlledHadamard):
        return ControlledHadamard(op.controls | {control}, op.target)
    if isinstance(op, Swap):
        return ControlledSwap(frozenset([control]), op.a, op.b)
    if isinstance(op, ControlledSwap):
        return ControlledSwap(op.controls | {control}, op.a, op.b)
    raise TypeError(f"Unsupported operation type: {type(op).__name__}")


def controlled(sequence: OperationSequence, control: Slot) -> OperationSequence:
    """
    Condition every operation of ``sequence`` on ``control``.

    Parameters
    ----------
    sequence : OperationSequence
        Sequence to lift.
    control : Slot
        Extra control slot. Must not be referenced anywhere in ``sequence``.

    Returns
    -------
    OperationSequence
        Lifted sequence. Controls are sets, so lifting by two slots gives
        the same result in either order.

    Raises
    ------
    InvalidArgumentError
        If ``control`` already appears in ``sequence``.
    """
    if control in sequence.slots():
        raise InvalidArgumentError(f"control slot {control!r} is already used by the sequence")
    return OperationSequence(_lift(op, control) for op in sequence)


# ============================================================================
# Configuration-driven construction
# ============================================================================

def build_qft(register: RegisterLike, config: Optional[QFTConfig] = None) -> OperationSequence:
    """
    Build a QFT variant selected by ``config``.

    Parameters
    ----------
    register : RegisterView or Iterable[Slot]
        Slots to transform.
    config : QFTConfig, optional
        Depth, direction and addressing. Defaults to the exact forward QFT.

    Returns
    -------
    OperationSequence
    """
    if config is None:
        config = QFTConfig()

    view = as_register_view(register)
    if config.little_endian:
        view = view.reversed_view()

    if config.depth is None:
        sequence = exact_qft(view)
    else:
        sequence = approximate_qft(view, config.depth)

    if config.inverse:
        sequence = adjoint(sequence)
    return sequence


def tensor_qft(registers: Sequence[RegisterLike], config: Optional[QFTConfig] = None) -> OperationSequence:
    """
    Apply the configured QFT to several registers, one after another.

    The registers act on disjoint slots, so the per-register sequences are
    independent and could be scheduled in parallel by the execution layer.

    Raises
    ------
    InvalidArgumentError
        If two registers share a slot.

    Examples
    --------
    >>> seq = tensor_qft([['a0', 'a1'], ['b0', 'b1']])
    >>> len(seq)
    8
    """
    views: List[RegisterView] = [as_register_view(r) for r in registers]

    seen = set()
    for view in views:
        overlap = seen.intersection(view.slots)
        if overlap:
            raise InvalidArgumentError(f"registers overlap on slots {sorted(map(repr, overlap))}")
        seen.update(view.slots)

    result = OperationSequence()
    for view in views:
        result = result + build_qft(view, config)

    logger.debug(f"Tensor QFT over {len(views)} registers: {len(result)} operations")
    return result
