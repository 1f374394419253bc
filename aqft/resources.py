"""
AQFT Resource Estimation
========================

Closed-form operation counts for the approximate QFT, and counting over a
built sequence.

- Hadamards: n
- Controlled rotations (exact): n(n-1)/2
- Controlled rotations (depth a): sum over gaps g < a of (n - g)
- Swaps: n // 2
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .core.builder import validate_depth
from .core.operations import OperationSequence


@dataclass
class QFTResources:
    """Operation counts for one (A)QFT build."""
    n_slots: int
    depth: int
    hadamards: int
    rotations: int
    swaps: int
    total_operations: int


def estimate_qft_resources(n_slots: int, depth: Optional[int] = None) -> QFTResources:
    """
    Estimate operation counts for the AQFT on ``n_slots`` slots.

    Parameters
    ----------
    n_slots : int
        Register length.
    depth : int, optional
        Pruning depth; None means exact (depth = n_slots).

    Returns
    -------
    QFTResources
        Counts matching what ``approximate_qft`` emits.

    Raises
    ------
    InvalidArgumentError
        Under the same conditions as the builder.
    """
    n = n_slots
    if depth is None:
        depth = n
    validate_depth(n, depth)

    # Gap g appears for every i >= g, i.e. n - g times
    rotations = sum(n - g for g in range(1, depth))
    hadamards = n
    swaps = n // 2

    return QFTResources(
        n_slots=n,
        depth=depth,
        hadamards=hadamards,
        rotations=rotations,
        swaps=swaps,
        total_operations=hadamards + rotations + swaps,
    )


def estimate_tensor_qft_resources(
    n_registers: int,
    n_slots: int,
    depth: Optional[int] = None
) -> Dict[str, Any]:
    """
    Estimate totals for applying the AQFT to several equal-size registers.
    """
    single = estimate_qft_resources(n_slots, depth)
    return {
        'n_registers': n_registers,
        'single_register': single,
        'total_hadamards': n_registers * single.hadamards,
        'total_rotations': n_registers * single.rotations,
        'total_swaps': n_registers * single.swaps,
        'total_operations': n_registers * single.total_operations,
    }


def count_operations(sequence: OperationSequence) -> Dict[str, int]:
    """Per-kind operation counts of a built sequence, with a 'total' entry."""
    counts = sequence.count_by_kind()
    counts['total'] = len(sequence)
    return counts
