"""
Unit tests for QFT variants: little-endian wrapper, adjoint, controlled lift,
config-driven and tensor construction.
"""

from collections import Counter, defaultdict

import pytest

from aqft.core import (
    ControlledHadamard,
    ControlledRotate,
    ControlledSwap,
    Hadamard,
    InvalidArgumentError,
    OperationSequence,
    QFTConfig,
    Rotate,
    Swap,
    adjoint,
    approximate_qft,
    build_qft,
    controlled,
    exact_qft,
    little_endian_qft,
    tensor_qft,
)


def _slots(n, prefix="q"):
    return [f"{prefix}{i}" for i in range(n)]


def _relabel(op, mapping):
    if isinstance(op, ControlledRotate):
        return ControlledRotate({mapping[c] for c in op.controls}, mapping[op.target],
                                op.numerator, op.exponent)
    if isinstance(op, Hadamard):
        return Hadamard(mapping[op.target])
    if isinstance(op, Swap):
        return Swap(mapping[op.a], mapping[op.b])
    raise AssertionError(f"unexpected {op!r}")


class TestLittleEndian:
    """Reversed addressing is the forward transform seen through the bijection."""

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 7])
    def test_relabelled_equals_forward(self, n):
        slots = _slots(n)
        reversal = {slots[i]: slots[n - 1 - i] for i in range(n)}
        le = little_endian_qft(slots)
        relabelled = [_relabel(op, reversal) for op in le]
        assert relabelled == list(exact_qft(slots))

    def test_same_as_forward_on_reversed_list(self):
        slots = _slots(5)
        assert little_endian_qft(slots) == exact_qft(slots[::-1])

    def test_empty(self):
        with pytest.raises(InvalidArgumentError):
            little_endian_qft([])


class TestAdjoint:
    """Inverse sequences."""

    @pytest.mark.parametrize("n,depth", [(1, 1), (3, 3), (5, 2), (6, 6)])
    def test_involution(self, n, depth):
        seq = approximate_qft(_slots(n), depth)
        assert adjoint(adjoint(seq)) == seq

    def test_order_and_numerators(self):
        seq = exact_qft(_slots(3))
        inv = adjoint(seq)
        assert len(inv) == len(seq)
        for forward, backward in zip(seq, reversed(list(inv))):
            if isinstance(forward, ControlledRotate):
                assert backward.numerator == -forward.numerator
                assert backward.exponent == forward.exponent
                assert backward.controls == forward.controls
                assert backward.target == forward.target
            else:
                assert backward == forward

    def test_uncontrolled_rotate(self):
        seq = OperationSequence([Rotate('a', 3, 4), Hadamard('a')])
        assert list(adjoint(seq)) == [Hadamard('a'), Rotate('a', -3, 4)]

    @pytest.mark.parametrize("n", [2, 4, 5])
    def test_round_trip_cancels(self, n):
        seq = exact_qft(_slots(n))
        combined = seq + adjoint(seq)

        phase_sum = defaultdict(int)
        swaps = Counter()
        for op in combined:
            if isinstance(op, ControlledRotate):
                phase_sum[(op.controls, op.target, op.exponent)] += op.numerator
            elif isinstance(op, Swap):
                swaps[frozenset([op.a, op.b])] += 1
        assert all(total == 0 for total in phase_sum.values())
        assert all(count % 2 == 0 for count in swaps.values())

    def test_controlled_forms_pass_through(self):
        seq = OperationSequence([ControlledHadamard({'c'}, 't'), ControlledSwap({'c'}, 'a', 'b')])
        assert list(adjoint(seq)) == [ControlledSwap({'c'}, 'a', 'b'), ControlledHadamard({'c'}, 't')]


class TestControlled:
    """Controlled lift."""

    def test_lift_each_kind(self):
        seq = OperationSequence([
            Rotate('t', 1, 2),
            ControlledRotate({'a'}, 't', 1, 1),
            Hadamard('t'),
            Swap('a', 't'),
        ])
        lifted = controlled(seq, 'c')
        assert list(lifted) == [
            ControlledRotate({'c'}, 't', 1, 2),
            ControlledRotate({'a', 'c'}, 't', 1, 1),
            ControlledHadamard({'c'}, 't'),
            ControlledSwap({'c'}, 'a', 't'),
        ]

    def test_every_operation_gains_control(self):
        lifted = controlled(exact_qft(_slots(4)), 'ctl')
        assert len(lifted) == len(exact_qft(_slots(4)))
        assert all('ctl' in op.controls for op in lifted)

    def test_lift_order_does_not_matter(self):
        seq = approximate_qft(_slots(5), 3)
        assert controlled(controlled(seq, 'x'), 'y') == controlled(controlled(seq, 'y'), 'x')

    def test_double_lift_controls(self):
        lifted = controlled(controlled(OperationSequence([Hadamard('t'), Swap('a', 'b')]), 'x'), 'y')
        assert list(lifted) == [
            ControlledHadamard({'x', 'y'}, 't'),
            ControlledSwap({'x', 'y'}, 'a', 'b'),
        ]

    def test_control_already_used(self):
        seq = exact_qft(_slots(3))
        with pytest.raises(InvalidArgumentError, match="already used"):
            controlled(seq, 'q1')

    def test_adjoint_of_controlled(self):
        seq = exact_qft(_slots(3))
        assert adjoint(controlled(seq, 'c')) == controlled(adjoint(seq), 'c')

    def test_single_control_accessor(self):
        op = ControlledRotate({'a', 'b'}, 't', 1, 1)
        with pytest.raises(AttributeError):
            op.control


class TestBuildQFT:
    """Config-driven dispatch."""

    def test_default_is_exact(self):
        slots = _slots(4)
        assert build_qft(slots) == exact_qft(slots)

    def test_depth(self):
        slots = _slots(5)
        assert build_qft(slots, QFTConfig(depth=2)) == approximate_qft(slots, 2)

    def test_inverse(self):
        slots = _slots(4)
        assert build_qft(slots, QFTConfig(inverse=True)) == adjoint(exact_qft(slots))

    def test_little_endian(self):
        slots = _slots(4)
        assert build_qft(slots, QFTConfig(little_endian=True)) == little_endian_qft(slots)

    def test_invalid_depth(self):
        with pytest.raises(InvalidArgumentError):
            build_qft(_slots(3), QFTConfig(depth=5))


class TestTensorQFT:
    """Independent transforms over several registers."""

    def test_concatenates(self):
        a, b = _slots(3, "a"), _slots(2, "b")
        seq = tensor_qft([a, b])
        assert seq == exact_qft(a) + exact_qft(b)

    def test_with_config(self):
        regs = [_slots(4, "a"), _slots(4, "b")]
        config = QFTConfig(depth=2, inverse=True)
        seq = tensor_qft(regs, config)
        assert seq == build_qft(regs[0], config) + build_qft(regs[1], config)

    def test_overlap_rejected(self):
        with pytest.raises(InvalidArgumentError, match="overlap"):
            tensor_qft([['a', 'b'], ['b', 'c']])

    def test_no_registers(self):
        assert len(tensor_qft([])) == 0
