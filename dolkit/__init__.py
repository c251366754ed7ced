"""ELF to DOL conversion and small GameCube base-library data structures."""

__version__ = "0.1.0"

__all__ = [
    "elf2dol",
    "hsdrandom",
    "idtable",
    "slist",
    "texp",
    "gobj",
    "fobj",
    "robj",
    "lobj",
]