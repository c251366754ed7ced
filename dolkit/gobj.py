"""Game objects, their process chains, render-link ordering and user data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

USER_DATA_NONE = 0xFF
"""The user-data kind of a game object that carries no user data."""


@dataclass(eq=False)
class GObjProc:
    """A process attached to a game object; processes chain through ``child``."""

    child: Optional["GObjProc"] = None
    next: Optional["GObjProc"] = None
    prev: Optional["GObjProc"] = None
    s_link: int = 0
    flags_1: int = 0
    flags_2: int = 0
    flags_3: int = 0
    gobj: Optional["GObj"] = None
    callback: Optional[Callable[["GObj"], Any]] = None


@dataclass(eq=False)
class GObj:
    """A game object with a process chain, a render link and optional user data."""

    classifier: int = 0
    p_link: int = 0
    gx_link: int = 0
    p_priority: int = 0
    render_priority: int = 0
    obj_kind: int = 0
    user_data_kind: int = USER_DATA_NONE
    next: Optional["GObj"] = None
    prev: Optional["GObj"] = None
    next_gx: Optional["GObj"] = None
    prev_gx: Optional["GObj"] = None
    proc: Optional[GObjProc] = None
    render_cb: Optional[Callable[["GObj", int], Any]] = None
    gxlink_prios: int = 0
    hsd_obj: Any = None
    user_data: Any = None
    user_data_remove_func: Optional[Callable[[Any], Any]] = None

    def procs(self) -> Iterator[GObjProc]:
        """Yield the processes of this object, following the ``child`` chain."""
        proc = self.proc
        while proc is not None:
            yield proc
            proc = proc.child

    def set_flag1(self) -> None:
        """Set the first flag on every process."""
        for proc in self.procs():
            proc.flags_1 = 1

    def clear_flag1(self) -> None:
        """Clear the first flag on every process."""
        for proc in self.procs():
            proc.flags_1 = 0

    def clear_flag2(self) -> None:
        """Clear the second flag on every process."""
        for proc in self.procs():
            proc.flags_2 = 0

    def set_flag3(self, value: int) -> None:
        """Store the two-bit third flag on every process."""
        for proc in self.procs():
            proc.flags_3 = value & 0x3

    def init_user_data(self, kind: int, remove_func, data: Any) -> None:
        """Attach user data; the object must not already carry any."""
        if self.user_data_kind != USER_DATA_NONE:
            raise RuntimeError("gobj->user_data_kind == HSD_GOBJ_USER_DATA_NONE")
        self.user_data_kind = kind & 0xFF
        self.user_data = data
        self.user_data_remove_func = remove_func

    def remove_user_data(self) -> None:
        """Release the user data through its remove function, if there is any."""
        if self.user_data_kind == USER_DATA_NONE:
            return
        if self.user_data_remove_func is None:
            raise RuntimeError("gobj->user_data_remove_func")
        self.user_data_remove_func(self.user_data)
        self.user_data_kind = USER_DATA_NONE
        self.user_data = None


class GXLinkTable:
    """Render links: per link, a doubly linked list ordered by rising priority."""

    def __init__(self, gx_link_max: int) -> None:
        self.gx_link_max = gx_link_max
        self.heads: list[Optional[GObj]] = [None] * (gx_link_max + 1)
        self.tails: list[Optional[GObj]] = [None] * (gx_link_max + 1)

    def reorder(self, gobj: GObj, hiprio_gobj: Optional[GObj]) -> None:
        """Insert gobj right after hiprio_gobj, or at the head of its link."""
        link = gobj.gx_link
        gobj.prev_gx = hiprio_gobj
        if hiprio_gobj is not None:
            gobj.next_gx = hiprio_gobj.next_gx
            hiprio_gobj.next_gx = gobj
        else:
            gobj.next_gx = self.heads[link]
            self.heads[link] = gobj
        if gobj.next_gx is not None:
            gobj.next_gx.prev_gx = gobj
        else:
            self.tails[link] = gobj

    def setup(self, gobj: GObj, render_cb, gx_link: int, priority: int) -> None:
        """Give gobj a render callback and place it in its link by priority."""
        if not 0 <= gx_link <= self.gx_link_max:
            raise ValueError("gx_link <= HSD_GObjLibInitData.gx_link_max")
        gobj.render_cb = render_cb
        gobj.gx_link = gx_link
        gobj.render_priority = priority & 0xFF
        node = self.tails[gx_link]
        while node is not None and node.render_priority > gobj.render_priority:
            node = node.prev_gx
        self.reorder(gobj, node)

    def iter_link(self, gx_link: int) -> Iterator[GObj]:
        """Yield the objects of one link from head to tail."""
        node = self.heads[gx_link]
        while node is not None:
            yield node
            node = node.next_gx