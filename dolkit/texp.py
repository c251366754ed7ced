"""Texture-environment expression nodes and their reference counting."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional, Union


class TEInput(IntEnum):
    END = 0
    RGB = 1
    R = 2
    G = 3
    B = 4
    A = 5
    X = 6
    ZERO = 7
    ONE = 8
    ONE_8 = 9
    TWO_8 = 10
    THREE_8 = 11
    FOUR_8 = 12
    FIVE_8 = 13
    SIX_8 = 14
    SEVEN_8 = 15
    INPUT_MAX = 16
    UNDEF = 0xFF


class TEType(IntEnum):
    U8 = 0
    U16 = 1
    U32 = 2
    F32 = 3
    F64 = 4
    COMP_TYPE_MAX = 5


class TExpType(IntEnum):
    ZERO = 0
    TEV = 1
    TEX = 2
    RAS = 3
    CNST = 4
    IMM = 5
    KONST = 6
    ALL = 7
    TYPE_MAX = 8


class _Marker:
    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return self.name


TEX = _Marker("TEX")
"""Stands for the texture colour as an expression input."""

RAS = _Marker("RAS")
"""Stands for the rasterised colour as an expression input."""


@dataclass
class TEArg:
    """One input of a TEV stage: which expression it reads and with which selector."""

    type: int = 0
    sel: int = 0
    arg: int = 0
    exp: Any = None


def _four_args() -> list[TEArg]:
    return [TEArg() for _ in range(4)]


@dataclass(eq=False)
class TevExpression:
    """A TEV stage, counting colour and alpha references separately."""

    type: TExpType = field(default=TExpType.TEV, init=False)
    next: Any = None
    c_ref: int = 0
    c_dst: int = 0
    c_op: int = 0
    c_clamp: int = 0
    c_bias: int = 0
    c_scale: int = 0
    c_range: int = 0
    a_ref: int = 0
    a_dst: int = 0
    a_op: int = 0
    a_clamp: int = 0
    a_bias: int = 0
    a_scale: int = 0
    tex_swap: int = 0
    ras_swap: int = 0
    kcsel: int = 0
    kasel: int = 0
    c_in: list[TEArg] = field(default_factory=_four_args)
    a_in: list[TEArg] = field(default_factory=_four_args)
    tex: Any = None
    chan: int = 0


@dataclass(eq=False)
class ConstExpression:
    """A constant input, with an 8-bit reference count."""

    type: TExpType = field(default=TExpType.CNST, init=False)
    next: Any = None
    val: Any = None
    comp: TEInput = TEInput.END
    ctype: TEType = TEType.U8
    reg: int = 0
    idx: int = 0
    ref: int = 0
    range: int = 0


Expression = Optional[Union[TevExpression, ConstExpression, _Marker]]


def get_type(texp: Expression) -> TExpType:
    """The kind of expression texp is; None counts as zero."""
    if texp is None:
        return TExpType.ZERO
    if texp is TEX:
        return TExpType.TEX
    if texp is RAS:
        return TExpType.RAS
    return TExpType(texp.type)


def ref(texp: Expression, sel: int) -> None:
    """Add a reference; sel 1 counts towards colour, anything else towards alpha."""
    kind = get_type(texp)
    if kind == TExpType.CNST:
        texp.ref = (texp.ref + 1) & 0xFF
    elif kind == TExpType.TEV:
        if sel == 1:
            texp.c_ref += 1
        else:
            texp.a_ref += 1


def unref(texp: Expression, sel: int) -> None:
    """Drop a reference; an unreferenced stage releases its own inputs."""
    kind = get_type(texp)
    if kind == TExpType.CNST:
        if texp.ref:
            texp.ref -= 1
        return
    if kind != TExpType.TEV:
        return
    if sel == 1:
        if texp.c_ref:
            texp.c_ref -= 1
    elif texp.a_ref:
        texp.a_ref -= 1
    if texp.c_ref == 0 and texp.a_ref == 0:
        for c_arg, a_arg in zip(texp.c_in, texp.a_in):
            unref(c_arg.exp, c_arg.sel)
            unref(a_arg.exp, a_arg.sel)