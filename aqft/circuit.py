"""
Qiskit Circuit Export
=====================

Lowers an OperationSequence onto a qiskit QuantumCircuit so it can be drawn,
transpiled, simulated or run on hardware. Qiskit owns the numerical
semantics from here on.

Operation mapping:
- Rotate                 -> p(angle)
- ControlledRotate       -> cp (one control) / mcp (several)
- Hadamard               -> h
- ControlledHadamard     -> ch (one control) / HGate().control(k)
- Swap                   -> swap
- ControlledSwap         -> cswap (one control) / SwapGate().control(k)

Slots must be something the circuit accepts as a qubit argument: a Qubit
belonging to the circuit, or an integer index.
"""

from numbers import Integral
from typing import Optional

from qiskit import QuantumCircuit
from qiskit.circuit.library import HGate, SwapGate

from .core.register import InvalidArgumentError
from .core.operations import (
    ControlledHadamard,
    ControlledRotate,
    ControlledSwap,
    Hadamard,
    Operation,
    OperationSequence,
    Rotate,
    Swap,
)


def _append(circuit: QuantumCircuit, op: Operation) -> None:
    if isinstance(op, Rotate):
        circuit.p(op.angle, op.target)
    elif isinstance(op, ControlledRotate):
        controls = list(op.controls)
        if len(controls) == 1:
            circuit.cp(op.angle, controls[0], op.target)
        else:
            circuit.mcp(op.angle, controls, op.target)
    elif isinstance(op, Hadamard):
        circuit.h(op.target)
    elif isinstance(op, ControlledHadamard):
        controls = list(op.controls)
        if len(controls) == 1:
            circuit.ch(controls[0], op.target)
        else:
            circuit.append(HGate().control(len(controls)), controls + [op.target])
    elif isinstance(op, Swap):
        circuit.swap(op.a, op.b)
    elif isinstance(op, ControlledSwap):
        controls = list(op.controls)
        if len(controls) == 1:
            circuit.cswap(controls[0], op.a, op.b)
        else:
            circuit.append(SwapGate().control(len(controls)), controls + [op.a, op.b])
    else:
        raise TypeError(f"Unsupported operation type: {type(op).__name__}")


def to_circuit(
    sequence: OperationSequence,
    circuit: Optional[QuantumCircuit] = None,
    name: str = "AQFT"
) -> QuantumCircuit:
    """
    Append every operation of ``sequence`` to a QuantumCircuit, in order.

    Parameters
    ----------
    sequence : OperationSequence
        Operations to lower.
    circuit : QuantumCircuit, optional
        Circuit to modify in-place. If omitted, every slot must be a
        non-negative integer and a circuit with max(slot) + 1 qubits is
        created.
    name : str, default="AQFT"
        Name of a newly created circuit.

    Returns
    -------
    QuantumCircuit
        The circuit the operations were appended to.

    Examples
    --------
    >>> from aqft import little_endian_qft
    >>> qc = to_circuit(little_endian_qft(range(3)))
    >>> qc.count_ops()['h']
    3
    """
    if circuit is None:
        slots = sequence.slots()
        if not all(isinstance(s, Integral) and not isinstance(s, bool) and s >= 0 for s in slots):
            raise InvalidArgumentError(
                "slots must be non-negative integers when no circuit is supplied"
            )
        num_qubits = max(slots) + 1 if slots else 0
        circuit = QuantumCircuit(num_qubits, name=name)

    for op in sequence:
        _append(circuit, op)
    return circuit

