"""Light objects and their flag bits."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional

A_L_LITC_R = 9
A_L_LITC_G = 10
A_L_LITC_B = 11
A_L_VIS = 12
A_L_A0 = 13
A_L_A1 = 14
A_L_A2 = 15
A_L_K0 = 16
A_L_K1 = 17
A_L_K2 = 18
A_L_CUTOFF = 19
A_L_REFDIST = 20
A_L_REFBRIGHT = 21
A_L_LITC_A = 22

DIFFUSE = 1 << 2
SPECULAR = 1 << 3
ALPHA = 1 << 4
HIDDEN = 1 << 5
RAW_PARAM = 1 << 6
DIFF_DIRTY = 1 << 7
SPEC_DIRTY = 1 << 8
TYPE_MASK = 3

LIGHT_ATTN_NONE = 0
LIGHT_ATTN = 1

_MASK16 = 0xFFFF


class LightType(IntEnum):
    """The kind of light held in the two low flag bits."""

    AMBIENT = 0
    INFINITE = 1
    POINT = 2
    SPOT = 3


@dataclass(eq=False)
class LObj:
    """A light; lights chain through ``next``. Flags are 16 bits wide."""

    flags: int = 0
    priority: int = 0
    next: Optional["LObj"] = None
    color: tuple[int, int, int, int] = (0, 0, 0, 0)
    hw_color: tuple[int, int, int, int] = (0, 0, 0, 0)
    position: Any = None
    interest: Any = None
    shininess: float = 0.0
    lvec: tuple[float, float, float] = field(default=(0.0, 0.0, 0.0))
    aobj: Any = None
    id: int = 0
    spec_id: int = 0

    def set_flags(self, flags: int) -> None:
        """Turn on the given flag bits."""
        self.flags = (self.flags | flags) & _MASK16

    def clear_flags(self, flags: int) -> None:
        """Turn off the given flag bits."""
        self.flags = self.flags & ~flags & _MASK16

    def light_type(self) -> LightType:
        """The kind of light."""
        return LightType(self.flags & TYPE_MASK)