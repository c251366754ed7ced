"""Animation frame objects: state flags and restarting their playback."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterator, Optional

FRAC_FLOAT = 0 << 5
FRAC_S16 = 1 << 5
FRAC_U16 = 2 << 5
FRAC_S8 = 3 << 5
FRAC_U8 = 4 << 5

TYPE_ROBJ = 1
TYPE_JOBJ = 12

_STATE_MASK = 0xF
_UPPER_MASK = 0xF0
_FLAG_0x40 = 0x40


class InterpOp(IntEnum):
    """Interpolation opcodes of animation key data."""

    NONE = 0
    CON = 1
    LIN = 2
    SPL0 = 3
    SPL = 4
    SLP = 5
    KEY = 6


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


@dataclass(eq=False)
class FObj:
    """One animation track; tracks chain through ``next``."""

    next: Optional["FObj"] = None
    ad: Any = None
    ad_head: Any = None
    length: int = 0
    flags: int = 0
    op: int = 0
    op_intrp: int = 0
    obj_type: int = 0
    frac_value: int = 0
    frac_slope: int = 0
    nb_pack: int = 0
    startframe: int = 0
    fterm: int = 0
    time: float = 0.0
    p0: float = 0.0
    p1: float = 0.0
    d0: float = 0.0
    d1: float = 0.0

    def set_state(self, state: int) -> int:
        """Store the low four bits of state, keeping the upper flag bits."""
        self.flags = (state & _STATE_MASK) | (self.flags & _UPPER_MASK)
        return state

    def get_state(self) -> int:
        """The four-bit playback state."""
        return self.flags & _STATE_MASK

    def req_anim(self, startframe: float) -> None:
        """Rewind the track to its key data and start playing at startframe."""
        self.ad = self.ad_head
        self.time = _f32(float(self.startframe) + startframe)
        self.op = 0
        self.op_intrp = 0
        self.flags &= ~_FLAG_0x40 & 0xFF
        self.nb_pack = 0
        self.fterm = 0
        self.p0 = 0.0
        self.p1 = 0.0
        self.d0 = 0.0
        self.d1 = 0.0
        self.set_state(1)


def iter_chain(fobj: Optional[FObj]) -> Iterator[FObj]:
    """Yield fobj and every track after it."""
    while fobj is not None:
        yield fobj
        fobj = fobj.next


def req_anim_all(fobj: Optional[FObj], startframe: float) -> None:
    """Restart every track in the chain at startframe."""
    for track in iter_chain(fobj):
        track.req_anim(startframe)