"""
Register Addressing
===================

Two index conventions over one ordered tuple of slots:

- forward (big-endian): index 0 is the most significant slot
- reversed (little-endian): index 0 is the least significant slot

The views are related by ``reversed_index(i) = n - 1 - i``. Switching views
never copies the slots; both views share the same underlying tuple.
"""

from collections import Counter
from typing import Any, Hashable, Iterable, Iterator, Tuple, Union


Slot = Hashable


class RegisterIndexError(IndexError):
    """Raised when a register index falls outside ``[0, n)``."""


class InvalidArgumentError(ValueError):
    """Raised for arguments outside an entry point's documented domain."""


class RegisterView:
    """
    Read-only, permutation-aware view over an ordered tuple of slots.

    Parameters
    ----------
    slots : Iterable[Slot]
        Slot handles in forward (big-endian) order. Any hashable object works:
        integer qubit indices, ``qiskit.circuit.Qubit`` objects, labels.
    reversed : bool, default=False
        If True, index 0 addresses the last slot of ``slots``.

    Examples
    --------
    >>> view = RegisterView(['a', 'b', 'c'])
    >>> view[0], view.reversed_view()[0]
    ('a', 'c')
    """

    __slots__ = ('_slots', '_reversed')

    def __init__(self, slots: Iterable[Slot], reversed: bool = False):
        self._slots: Tuple[Slot, ...] = tuple(slots)
        self._reversed = bool(reversed)

    @classmethod
    def _share(cls, slots: Tuple[Slot, ...], reversed: bool) -> 'RegisterView':
        view = cls.__new__(cls)
        view._slots = slots
        view._reversed = reversed
        return view

    @property
    def is_reversed(self) -> bool:
        return self._reversed

    @property
    def slots(self) -> Tuple[Slot, ...]:
        """Underlying slots in forward order, regardless of the view."""
        return self._slots

    def __len__(self) -> int:
        return len(self._slots)

    def forward_index(self, i: int) -> int:
        """Map an index in this view to the index in the underlying tuple."""
        n = len(self._slots)
        if not 0 <= i < n:
            raise RegisterIndexError(f"index {i} out of range for register of length {n}")
        return n - 1 - i if self._reversed else i

    def __getitem__(self, i: int) -> Slot:
        return self._slots[self.forward_index(i)]

    def __iter__(self) -> Iterator[Slot]:
        if self._reversed:
            return iter(self._slots[::-1])
        return iter(self._slots)

    def reversed_view(self) -> 'RegisterView':
        """Same slots, opposite addressing convention."""
        return RegisterView._share(self._slots, not self._reversed)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, RegisterView):
            return NotImplemented
        return self._slots == other._slots and self._reversed == other._reversed

    def __hash__(self) -> int:
        return hash((self._slots, self._reversed))

    def __repr__(self) -> str:
        kind = "LittleEndian" if self._reversed else "BigEndian"
        return f"RegisterView<{kind}>({list(self._slots)!r})"


def as_register_view(register: Union[RegisterView, Iterable[Slot]]) -> RegisterView:
    """Return ``register`` unchanged if it is a view, else wrap it in a forward view."""
    if isinstance(register, RegisterView):
        return register
    return RegisterView(register)


def check_distinct_slots(view: RegisterView) -> None:
    """
    Raise InvalidArgumentError if a slot appears more than once in ``view``.
    """
    counts = Counter(view.slots)
    repeated = [slot for slot, count in counts.items() if count > 1]
    if repeated:
        raise InvalidArgumentError(f"register contains repeated slots: {repeated!r}")
