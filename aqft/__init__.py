"""
AQFT: Approximate Quantum Fourier Transform Circuits
====================================================

Deterministic construction of (approximate) QFT gate sequences over an
ordered register of opaque qubit slots.

Key Features:
- Approximate QFT with a pruning depth; exact QFT as the maximal-depth case
- Big-endian and little-endian register addressing over one slot tuple
- Adjoint and controlled variants as pure sequence transformations
- Closed-form resource estimates
- Lowering onto qiskit QuantumCircuit for execution

Example:
    >>> from aqft import approximate_qft, adjoint
    >>> seq = approximate_qft(['q0', 'q1', 'q2', 'q3'], depth=2)
    >>> inverse = adjoint(seq)
"""

__version__ = "1.0.0"

from .core import (
    ControlledHadamard,
    ControlledRotate,
    ControlledSwap,
    Hadamard,
    InvalidArgumentError,
    OperationSequence,
    QFTConfig,
    RegisterIndexError,
    RegisterView,
    Rotate,
    Swap,
    adjoint,
    approximate_qft,
    build_qft,
    controlled,
    exact_qft,
    little_endian_qft,
    reverse_register,
    tensor_qft,
)
from .resources import QFTResources, count_operations, estimate_qft_resources
from .circuit import to_circuit

__all__ = [
    'ControlledHadamard',
    'ControlledRotate',
    'ControlledSwap',
    'Hadamard',
    'InvalidArgumentError',
    'OperationSequence',
    'QFTConfig',
    'RegisterIndexError',
    'RegisterView',
    'Rotate',
    'Swap',
    'adjoint',
    'approximate_qft',
    'build_qft',
    'controlled',
    'exact_qft',
    'little_endian_qft',
    'reverse_register',
    'tensor_qft',
    'QFTResources',
    'count_operations',
    'estimate_qft_resources',
    'to_circuit',
]
