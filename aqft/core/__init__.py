"""
AQFT core: register addressing, operation records, the approximate QFT
builder and its derived variants.
"""

from .register import (
    InvalidArgumentError,
    RegisterIndexError,
    RegisterView,
    Slot,
    as_register_view,
    check_distinct_slots,
)
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
from .builder import approximate_qft, reverse_register, validate_depth
from .transforms import (
    QFTConfig,
    adjoint,
    build_qft,
    controlled,
    exact_qft,
    little_endian_qft,
    tensor_qft,
)

__all__ = [
    'RegisterIndexError',
    'RegisterView',
    'Slot',
    'as_register_view',
    'check_distinct_slots',
    'ControlledHadamard',
    'ControlledRotate',
    'ControlledSwap',
    'Hadamard',
    'Operation',
    'OperationSequence',
    'Rotate',
    'Swap',
    'InvalidArgumentError',
    'approximate_qft',
    'reverse_register',
    'validate_depth',
    'QFTConfig',
    'adjoint',
    'build_qft',
    'controlled',
    'exact_qft',
    'little_endian_qft',
    'tensor_qft',
]
