"""Reference objects: typed constraints that can be switched on by animation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

from dolkit.fobj import TYPE_ROBJ

TYPE_MASK = 0x70000000
REFTYPE_JOBJ = 0x10000000
REFTYPE_IKHINT = 0x40000000
ACTIVE = 0x80000000
SUBTYPE_MASK = 0x0FFFFFFF

_ACTIVATE_THRESHOLD = 1.75
_MASK32 = 0xFFFFFFFF


@dataclass(eq=False)
class RObj:
    """A reference object; objects chain through ``next``."""

    next: Optional["RObj"] = None
    flags: int = 0
    target: Any = None
    aobj: Any = None

    def set_flags(self, flags: int) -> None:
        """Turn on the given flag bits."""
        self.flags = (self.flags | flags) & _MASK32

    def has_type(self) -> bool:
        """Whether the object is active."""
        return bool(self.flags & ACTIVE)

    def apply_update(self, type_: int, value: float) -> None:
        """Animation update: activate at or above 1.75, deactivate below."""
        if type_ != TYPE_ROBJ:
            return
        if value >= _ACTIVATE_THRESHOLD:
            self.flags |= ACTIVE
        else:
            self.flags &= ~ACTIVE & _MASK32


def iter_chain(robj: Optional[RObj]) -> Iterator[RObj]:
    """Yield robj and every object after it."""
    while robj is not None:
        yield robj
        robj = robj.next


def get_by_type(robj: Optional[RObj], type_: int, subtype: int = 0) -> Optional[RObj]:
    """The first active object of the given type, and subtype if one is given."""
    for curr in iter_chain(robj):
        if not curr.has_type():
            continue
        if (curr.flags & TYPE_MASK) == type_ and (
            not subtype or subtype == (curr.flags & SUBTYPE_MASK)
        ):
            return curr
    return None