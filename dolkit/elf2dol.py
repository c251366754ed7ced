"""Convert a big-endian PowerPC ELF executable into a DOL image, by segments."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass, field
from pathlib import Path

MAX_TEXT_SEGMENTS = 7
MAX_DATA_SEGMENTS = 11
DOL_ALIGNMENT = 32
HEADER_SIZE = 0x100

ELFCLASS32 = 1
ELFDATA2MSB = 2
EV_CURRENT = 1
ET_EXEC = 2
EM_PPC = 20

PT_LOAD = 1
PF_X = 1
PF_W = 2
PF_R = 4

_EI_CLASS = 4
_EI_DATA = 5
_EI_VERSION = 6

_MASK32 = 0xFFFFFFFF

_ELF_HEADER = struct.Struct(">16sHHIIIIIHHHHHH")
_PROGRAM_HEADER = struct.Struct(">8I")
_DOL_HEADER = struct.Struct(">64I")

_USAGE = (
    "Usage: {name} [-h] [-v] [--] elf-file dol-file\n"
    " Convert an ELF file to a DOL file (by segments)\n"
    " Options:\n"
    "  -h    Show this help\n"
    "  -v    Be more verbose (twice for even more)"
)


class ElfToDolError(Exception):
    """Raised when an ELF file cannot be turned into a DOL image."""


def _align(value: int) -> int:
    return (value + DOL_ALIGNMENT - 1) & ~(DOL_ALIGNMENT - 1) & _MASK32


def _log(verbosity: int, level: int, message: str) -> None:
    if verbosity >= level:
        print(message, file=sys.stderr)


@dataclass
class Segment:
    """A loadable segment: its load address, size and where its bytes live."""

    address: int
    size: int
    elf_offset: int
    dol_offset: int = 0


@dataclass
class DolLayout:
    """The segments, BSS range and entry point of a DOL image."""

    entry: int = 0
    text: list[Segment] = field(default_factory=list)
    data: list[Segment] = field(default_factory=list)
    bss_addr: int = 0
    bss_size: int = 0
    has_bss: bool = False
    verbosity: int = 0
    file_size: int = HEADER_SIZE
    laid_out: bool = False

    def add_bss(self, paddr: int, memsz: int) -> None:
        """Extend the single BSS range to cover another uninitialised area."""
        if self.has_bss:
            start, size = self.bss_addr, self.bss_size
            if paddr < start:
                self.bss_addr = paddr
            # The total size runs from the first BSS start to the end of the last.
            if (paddr + memsz) & _MASK32 > (start + size) & _MASK32:
                self.bss_size = (paddr + memsz - start) & _MASK32
        else:
            self.bss_addr = paddr
            self.bss_size = memsz
            self.has_bss = True

    def add_text(self, paddr: int, size: int, elf_offset: int) -> Segment:
        """Append a TEXT segment."""
        if len(self.text) >= MAX_TEXT_SEGMENTS:
            raise ElfToDolError("Error: Too many TEXT segments")
        segment = Segment(paddr, size, elf_offset)
        self.text.append(segment)
        return segment

    def add_data(self, paddr: int, size: int, elf_offset: int) -> Segment:
        """Append a DATA segment."""
        if len(self.data) >= MAX_DATA_SEGMENTS:
            raise ElfToDolError("Error: Too many DATA segments")
        segment = Segment(paddr, size, elf_offset)
        self.data.append(segment)
        return segment

    def layout(self) -> None:
        """Assign each segment its aligned offset in the DOL file."""
        _log(self.verbosity, 2, "Laying out DOL file...")
        pos = _align(HEADER_SIZE)
        for i, seg in enumerate(self.text):
            _log(self.verbosity, 2, f" TEXT segment {i} at 0x{pos:x}")
            seg.dol_offset = pos
            pos = _align(pos + seg.size)
        for i, seg in enumerate(self.data):
            _log(self.verbosity, 2, f" DATA segment {i} at 0x{pos:x}")
            seg.dol_offset = pos
            pos = _align(pos + seg.size)
        if not self.text:
            _log(self.verbosity, 1, "Note: adding dummy TEXT segment to work around IOS bug")
        if not self.data:
            _log(self.verbosity, 1, "Note: adding dummy DATA segment to work around IOS bug")
        self.file_size = pos
        self.laid_out = True

    def _column(self, segments: list[Segment], count: int, value) -> list[int]:
        column = [value(seg) & _MASK32 for seg in segments]
        return column + [0] * (count - len(column))

    def header_bytes(self) -> bytes:
        """The 256-byte big-endian DOL header, with sizes rounded up to 32."""
        text_off = self._column(self.text, MAX_TEXT_SEGMENTS, lambda s: s.dol_offset)
        data_off = self._column(self.data, MAX_DATA_SEGMENTS, lambda s: s.dol_offset)
        if self.laid_out and not self.text:
            text_off[0] = _align(HEADER_SIZE)
        if self.laid_out and not self.data:
            data_off[0] = _align(HEADER_SIZE)
        words = (
            text_off
            + data_off
            + self._column(self.text, MAX_TEXT_SEGMENTS, lambda s: s.address)
            + self._column(self.data, MAX_DATA_SEGMENTS, lambda s: s.address)
            + self._column(self.text, MAX_TEXT_SEGMENTS, lambda s: _align(s.size))
            + self._column(self.data, MAX_DATA_SEGMENTS, lambda s: _align(s.size))
            + [self.bss_addr & _MASK32, self.bss_size & _MASK32, self.entry & _MASK32]
            + [0] * 7
        )
        return _DOL_HEADER.pack(*words)


def _check_elf_header(data: bytes) -> tuple:
    if len(data) < _ELF_HEADER.size:
        raise ElfToDolError("EOF while reading ELF header")
    fields = _ELF_HEADER.unpack_from(data)
    ident, e_type, e_machine, e_version, e_entry = fields[:5]
    if ident[:4] != b"\x7fELF":
        raise ElfToDolError("Invalid ELF header")
    if ident[_EI_CLASS] != ELFCLASS32:
        raise ElfToDolError("Invalid ELF class")
    if ident[_EI_DATA] != ELFDATA2MSB:
        raise ElfToDolError("Invalid ELF byte order")
    if ident[_EI_VERSION] != EV_CURRENT:
        raise ElfToDolError("Invalid ELF ident version")
    if e_version != EV_CURRENT:
        raise ElfToDolError("Invalid ELF version")
    if e_type != ET_EXEC:
        raise ElfToDolError("ELF is not an executable")
    if e_machine != EM_PPC:
        raise ElfToDolError("Machine is not PowerPC")
    if not e_entry:
        raise ElfToDolError("ELF has no entrypoint")
    return fields


def read_elf_segments(data: bytes, verbosity: int = 0) -> DolLayout:
    """Validate an ELF image and collect its loadable segments into a layout."""
    _log(verbosity, 2, "Reading ELF file...")
    fields = _check_elf_header(data)
    e_entry, e_phoff = fields[4], fields[5]
    e_phentsize, e_phnum = fields[9], fields[10]

    layout = DolLayout(entry=e_entry, verbosity=verbosity)
    _log(verbosity, 2, "Valid ELF header found")

    if not e_phnum or not e_phoff:
        raise ElfToDolError("ELF has no program headers")
    if e_phentsize != _PROGRAM_HEADER.size:
        raise ElfToDolError("Invalid program header entry size")
    end = e_phoff + e_phnum * _PROGRAM_HEADER.size
    if len(data) < end:
        raise ElfToDolError("EOF while reading ELF program headers")

    for i, phdr in enumerate(_PROGRAM_HEADER.iter_unpack(data[e_phoff:end])):
        p_type, offset, vaddr, _paddr, filesz, memsz, flags, _align_ = phdr
        if p_type != PT_LOAD:
            _log(verbosity, 1, f"Skipping program header {i} of type {p_type}")
            continue
        if not memsz:
            _log(verbosity, 1, f"Skipping empty program header {i}")
            continue
        _log(
            verbosity,
            2,
            f"PHDR {i}: 0x{offset:x} [0x{filesz:x}] -> 0x{vaddr:08x} "
            f"[0x{memsz:x}] flags 0x{flags:x}",
        )
        if not flags & PF_R:
            print(f"Warning: non-readable segment {i}", file=sys.stderr)
        if flags & PF_X:
            if flags & PF_W:
                print(f"Warning: writable and executable segment {i}", file=sys.stderr)
            if filesz > memsz:
                raise ElfToDolError(
                    f"Error: TEXT segment {i} memory size (0x{memsz:x}) "
                    f"smaller than file size (0x{filesz:x})"
                )
            if memsz > filesz:
                layout.add_bss((vaddr + filesz) & _MASK32, memsz - filesz)
            layout.add_text(vaddr, filesz, offset)
        elif filesz == 0:
            layout.add_bss(vaddr, memsz)
        else:
            if filesz > memsz:
                raise ElfToDolError(
                    f"Error: segment {i} memory size (0x{memsz:x}) "
                    f"is smaller than file size (0x{filesz:x})"
                )
            layout.add_data(vaddr, filesz, offset)

    if verbosity >= 2:
        _log(verbosity, 2, "Segments:")
        for i, seg in enumerate(layout.text):
            _log(verbosity, 2, f" TEXT {i}: 0x{seg.address:08x} [0x{seg.size:x}] "
                               f"from ELF offset 0x{seg.elf_offset:x}")
        for i, seg in enumerate(layout.data):
            _log(verbosity, 2, f" DATA {i}: 0x{seg.address:08x} [0x{seg.size:x}] "
                               f"from ELF offset 0x{seg.elf_offset:x}")
        if layout.has_bss:
            _log(verbosity, 2, f" BSS segment: 0x{layout.bss_addr:08x} [0x{layout.bss_size:x}]")
    return layout


def _log_header(layout: DolLayout) -> None:
    v = layout.verbosity
    header = _DOL_HEADER.unpack(layout.header_bytes())
    text_off, data_off = header[0:7], header[7:18]
    text_addr, data_addr = header[18:25], header[25:36]
    sizes_text = [s.size for s in layout.text] + [0] * MAX_TEXT_SEGMENTS
    sizes_data = [s.size for s in layout.data] + [0] * MAX_DATA_SEGMENTS
    _log(v, 2, "DOL header:")
    for i in range(max(1, len(layout.text))):
        _log(v, 2, f" TEXT {i} @ 0x{text_addr[i]:08x} [0x{sizes_text[i]:x}] off 0x{text_off[i]:x}")
    for i in range(max(1, len(layout.data))):
        _log(v, 2, f" DATA {i} @ 0x{data_addr[i]:08x} [0x{sizes_data[i]:x}] off 0x{data_off[i]:x}")
    if layout.bss_addr and layout.bss_size:
        _log(v, 2, f" BSS @ 0x{layout.bss_addr:08x} [0x{layout.bss_size:x}]")
    _log(v, 2, f" Entry: 0x{layout.entry:08x}")
    _log(v, 2, "Writing DOL header...")


def build_dol(layout: DolLayout, elf_data: bytes) -> bytes:
    """Produce the DOL file contents for a layout, copying segments from the ELF."""
    if not layout.laid_out:
        layout.layout()
    _log(layout.verbosity, 2, "Writing DOL file...")
    if layout.verbosity >= 2:
        _log_header(layout)

    out = bytearray(layout.header_bytes())
    for kind, segments in (("TEXT", layout.text), ("DATA", layout.data)):
        for i, seg in enumerate(segments):
            _log(layout.verbosity, 2, f"Writing {kind} segment {i}...")
            chunk = elf_data[seg.elf_offset:seg.elf_offset + seg.size]
            if len(chunk) != seg.size:
                raise ElfToDolError("EOF while reading ELF segment data")
            end = seg.dol_offset + _align(seg.size)
            if len(out) < end:
                out.extend(bytes(end - len(out)))
            out[seg.dol_offset:seg.dol_offset + seg.size] = chunk
    _log(layout.verbosity, 2, "All done!")
    return bytes(out)


def convert(elf_path, dol_path, verbosity: int = 0) -> DolLayout:
    """Read the ELF at elf_path and write the DOL image to dol_path."""
    try:
        elf_data = Path(elf_path).read_bytes()
    except OSError as exc:
        raise ElfToDolError(f"Could not open ELF file: {exc.strerror}") from exc
    layout = read_elf_segments(elf_data, verbosity)
    layout.layout()
    dol = build_dol(layout, elf_data)
    try:
        Path(dol_path).write_bytes(dol)
    except OSError as exc:
        raise ElfToDolError(f"Could not open DOL file: {exc.strerror}") from exc
    return layout


def _usage(name: str) -> None:
    print(_USAGE.format(name=name), file=sys.stderr)


def main(argv=None) -> int:
    """Command-line entry point; returns the process exit status."""
    name = "elf2dol"
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        _usage(name)
        return 1
    verbosity = 0
    while args and args[0].startswith("-"):
        option = args.pop(0)
        if option == "-h":
            _usage(name)
            return 1
        if option == "-v":
            verbosity += 1
        elif option == "--":
            break
        else:
            print(f"Unrecognized option {option}", file=sys.stderr)
            _usage(name)
            return 1
    if len(args) < 2:
        _usage(name)
        return 1
    try:
        convert(args[0], args[1], verbosity)
    except ElfToDolError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())