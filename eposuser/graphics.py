"""Colour values, VESA BIOS information blocks and a software frame buffer.

A :class:`GraphicDevice` holds the frame buffer of one video mode. Pixels
are written in the memory layout of the mode's colour depth. A banked
(windowed) mode is modelled as 64 KiB-addressed windows, one per bank.
"""

import struct
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

ATTR_SUPPORTED = 0x01
ATTR_GRAPHICS = 0x10
ATTR_LINEAR = 0x80

VBE_INFO_SIZE = 512
MODE_INFO_SIZE = 256

_CGA_ODD_LINES = 0x2000


def rgb(r: int, g: int, b: int) -> int:
    """Pack red, green and blue bytes into a colour value."""
    return (r & 0xFF) | ((g & 0xFF) << 8) | ((b & 0xFF) << 16)


def rgba(r: int, g: int, b: int, a: int) -> int:
    """Pack red, green, blue and alpha bytes into a colour value."""
    return ((a & 0xFF) << 24) | rgb(r, g, b)


def red(c: int) -> int:
    return c & 0xFF


def green(c: int) -> int:
    return (c >> 8) & 0xFF


def blue(c: int) -> int:
    return (c >> 16) & 0xFF


def alpha(c: int) -> int:
    return (c >> 24) & 0xFF


def _linear_address(segment: int, offset: int) -> int:
    return ((segment & 0xFFFF) << 4) + (offset & 0xFFFF)


def _unpack(layout: List[Tuple[Optional[str], str]], data: bytes, size: int, what: str) -> dict:
    if len(data) < size:
        raise ValueError(f"{what} needs {size} bytes, got {len(data)}")
    fmt = "<" + "".join(code for _, code in layout)
    values = struct.unpack_from(fmt, data)
    return {name: value for (name, _), value in zip(layout, values) if name}


@dataclass
class VBEInfo:
    """The controller information block returned by VBE function 0x4F00."""

    signature: bytes = b""
    version: int = 0
    oem_string_ptr: int = 0
    capabilities: int = 0
    video_mode_ptr: int = 0
    total_memory: int = 0
    oem_software_rev: int = 0
    oem_vendor_name_ptr: int = 0
    oem_product_name_ptr: int = 0
    oem_product_rev_ptr: int = 0
    oem_data: bytes = b""

    @property
    def major(self) -> int:
        return (self.version >> 8) & 0xFF

    @property
    def minor(self) -> int:
        return self.version & 0xFF


_VBE_LAYOUT: List[Tuple[Optional[str], str]] = [
    ("signature", "4s"),
    ("version", "H"),
    ("oem_string_ptr", "I"),
    ("capabilities", "I"),
    ("video_mode_ptr", "I"),
    ("total_memory", "H"),
    ("oem_software_rev", "H"),
    ("oem_vendor_name_ptr", "I"),
    ("oem_product_name_ptr", "I"),
    ("oem_product_rev_ptr", "I"),
    (None, "222s"),
    ("oem_data", "256s"),
]


def parse_vbe_info(data: bytes) -> VBEInfo:
    """Decode a 512-byte controller information block."""
    return VBEInfo(**_unpack(_VBE_LAYOUT, data, VBE_INFO_SIZE, "VBE info block"))


@dataclass
class ModeInfo:
    """The mode information block returned by VBE function 0x4F01."""

    mode_attributes: int = 0
    win_a_attributes: int = 0
    win_b_attributes: int = 0
    win_granularity: int = 0
    win_size: int = 0
    win_a_segment: int = 0
    win_b_segment: int = 0
    win_func_ptr: int = 0
    bytes_per_scan_line: int = 0
    x_resolution: int = 0
    y_resolution: int = 0
    x_char_size: int = 0
    y_char_size: int = 0
    number_of_planes: int = 0
    bits_per_pixel: int = 0
    number_of_banks: int = 0
    memory_model: int = 0
    bank_size: int = 0
    number_of_image_pages: int = 0
    red_mask_size: int = 0
    red_field_position: int = 0
    green_mask_size: int = 0
    green_field_position: int = 0
    blue_mask_size: int = 0
    blue_field_position: int = 0
    rsvd_mask_size: int = 0
    rsvd_field_position: int = 0
    direct_color_mode_info: int = 0
    phys_base_ptr: int = 0
    lin_bytes_per_scan_line: int = 0
    bnk_number_of_image_pages: int = 0
    lin_number_of_image_pages: int = 0
    lin_red_mask_size: int = 0
    lin_red_field_position: int = 0
    lin_green_mask_size: int = 0
    lin_green_field_position: int = 0
    lin_blue_mask_size: int = 0
    lin_blue_field_position: int = 0
    lin_rsvd_mask_size: int = 0
    lin_rsvd_field_position: int = 0
    max_pixel_clock: int = 0

    @property
    def supported(self) -> bool:
        return bool(self.mode_attributes & ATTR_SUPPORTED)

    @property
    def is_graphics(self) -> bool:
        return bool(self.mode_attributes & ATTR_GRAPHICS)

    @property
    def has_linear_frame_buffer(self) -> bool:
        return bool(self.mode_attributes & ATTR_LINEAR) and self.phys_base_ptr != 0


_MODE_LAYOUT: List[Tuple[Optional[str], str]] = [
    ("mode_attributes", "H"),
    ("win_a_attributes", "B"),
    ("win_b_attributes", "B"),
    ("win_granularity", "H"),
    ("win_size", "H"),
    ("win_a_segment", "H"),
    ("win_b_segment", "H"),
    ("win_func_ptr", "I"),
    ("bytes_per_scan_line", "H"),
    ("x_resolution", "H"),
    ("y_resolution", "H"),
    ("x_char_size", "B"),
    ("y_char_size", "B"),
    ("number_of_planes", "B"),
    ("bits_per_pixel", "B"),
    ("number_of_banks", "B"),
    ("memory_model", "B"),
    ("bank_size", "B"),
    ("number_of_image_pages", "B"),
    (None, "B"),
    ("red_mask_size", "B"),
    ("red_field_position", "B"),
    ("green_mask_size", "B"),
    ("green_field_position", "B"),
    ("blue_mask_size", "B"),
    ("blue_field_position", "B"),
    ("rsvd_mask_size", "B"),
    ("rsvd_field_position", "B"),
    ("direct_color_mode_info", "B"),
    ("phys_base_ptr", "I"),
    (None, "I"),
    (None, "H"),
    ("lin_bytes_per_scan_line", "H"),
    ("bnk_number_of_image_pages", "B"),
    ("lin_number_of_image_pages", "B"),
    ("lin_red_mask_size", "B"),
    ("lin_red_field_position", "B"),
    ("lin_green_mask_size", "B"),
    ("lin_green_field_position", "B"),
    ("lin_blue_mask_size", "B"),
    ("lin_blue_field_position", "B"),
    ("lin_rsvd_mask_size", "B"),
    ("lin_rsvd_field_position", "B"),
    ("max_pixel_clock", "I"),
    (None, "190s"),
]


def parse_mode_info(data: bytes) -> ModeInfo:
    """Decode a 256-byte mode information block."""
    return ModeInfo(**_unpack(_MODE_LAYOUT, data, MODE_INFO_SIZE, "mode info block"))


@dataclass
class GraphicDevice:
    """A frame buffer for one graphics mode, linear or banked."""

    x_resolution: int
    y_resolution: int
    bytes_per_scan_line: int
    bits_per_pixel: int
    number_of_planes: int
    frame_buffer_size: int
    linear: bool
    base_address: int = 0
    bank_shift: int = 0
    frame_buffer: bytearray = field(default_factory=bytearray)
    current_bank: int = field(default=-1, init=False)
    bank_position: int = field(default=0, init=False)
    windows: Dict[int, bytearray] = field(default_factory=dict, init=False)

    def __post_init__(self) -> None:
        if not self.frame_buffer:
            self.frame_buffer = bytearray(self.frame_buffer_size)

    def switch_bank(self, bank: int) -> None:
        """Make ``bank`` (in 64 KiB units) the visible window of a banked mode."""
        if self.linear:
            raise RuntimeError("a linear frame buffer has no banks")
        if bank == self.current_bank:
            return
        self.bank_position = bank << self.bank_shift
        self.frame_buffer = self.windows.setdefault(bank, bytearray(self.frame_buffer_size))
        self.current_bank = bank

    def _locate(self, addr: int) -> int:
        if self.linear:
            return addr
        self.switch_bank((addr >> 16) & 0xFFFF)
        return addr & 0xFFFF

    def set_pixel(self, x: int, y: int, cr: int) -> None:
        """Plot colour ``cr`` at (x, y); points off the screen are ignored.

        Depths of 1 and 4 bits per pixel are not drawn.
        """
        if not (0 <= x < self.x_resolution and 0 <= y < self.y_resolution):
            return

        depth = self.bits_per_pixel
        bpp = depth + 1 if depth == 15 else depth
        addr = y * self.bytes_per_scan_line + (x * bpp) // 8

        if depth == 2:
            offset = (_CGA_ODD_LINES if y & 1 else 0) \
                + (y // 2) * self.bytes_per_scan_line + (x * bpp) // 8
            shift = 6 - 2 * (x & 3)
            value = self.frame_buffer[offset] & ~(3 << shift) & 0xFF
            self.frame_buffer[offset] = value | ((cr & 3) << shift)
        elif depth == 8:
            self.frame_buffer[self._locate(addr)] = red(cr)
        elif depth == 15:
            value = ((red(cr) & 0x1F) << 10) | ((green(cr) & 0x1F) << 5) | (blue(cr) & 0x1F)
            struct.pack_into("<H", self.frame_buffer, self._locate(addr), value)
        elif depth == 16:
            value = ((red(cr) & 0x1F) << 11) | ((green(cr) & 0x3F) << 5) | (blue(cr) & 0x1F)
            struct.pack_into("<H", self.frame_buffer, self._locate(addr), value)
        elif depth == 24:
            self._put_rgb24(addr, cr)
        elif depth == 32:
            value = (alpha(cr) << 24) | (red(cr) << 16) | (green(cr) << 8) | blue(cr)
            struct.pack_into("<I", self.frame_buffer, self._locate(addr), value)

    def _put_rgb24(self, addr: int, cr: int) -> None:
        components = (blue(cr), green(cr), red(cr))
        if self.linear:
            self.frame_buffer[addr:addr + 3] = bytes(components)
            return
        bank = (addr >> 16) & 0xFFFF
        offset = addr & 0xFFFF
        self.switch_bank(bank)
        for index, value in enumerate(components):
            if index and offset >= self.frame_buffer_size:
                offset = 0
                bank += 1
                self.switch_bank(bank)
            self.frame_buffer[offset] = value
            offset += 1

    def line(self, x1: int, y1: int, x2: int, y2: int, cr: int) -> None:
        """Draw a straight line from (x1, y1) to (x2, y2) in colour ``cr``."""
        for x, y in _line_points(x1, y1, x2, y2):
            self.set_pixel(x, y, cr)


def _line_points(x1: int, y1: int, x2: int, y2: int) -> Iterator[Tuple[int, int]]:
    """Yield the points of a line by the midpoint algorithm."""
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    if dy <= dx:
        if x2 < x1:
            x1, x2, y1, y2 = x2, x1, y2, y1
        step = 1 if y2 > y1 else -1
        d = 2 * dy - dx
        east, north_east = 2 * dy, 2 * (dy - dx)
        y = y1
        yield x1, y
        for x in range(x1 + 1, x2 + 1):
            if d < 0:
                d += east
            else:
                d += north_east
                y += step
            yield x, y
    else:
        if y2 < y1:
            x1, x2, y1, y2 = x2, x1, y2, y1
        step = 1 if x2 > x1 else -1
        d = 2 * dx - dy
        east, north_east = 2 * dx, 2 * (dx - dy)
        x = x1
        yield x, y1
        for y in range(y1 + 1, y2 + 1):
            if d < 0:
                d += east
            else:
                d += north_east
                x += step
            yield x, y


def create_device(info: ModeInfo, vbe_version: int) -> GraphicDevice:
    """Build the frame buffer for a mode reported by a VBE of ``vbe_version``."""
    if info.has_linear_frame_buffer:
        major = (vbe_version >> 8) & 0xFF
        scan_line = info.lin_bytes_per_scan_line if major >= 3 else info.bytes_per_scan_line
        return GraphicDevice(
            x_resolution=info.x_resolution,
            y_resolution=info.y_resolution,
            bytes_per_scan_line=scan_line,
            bits_per_pixel=info.bits_per_pixel,
            number_of_planes=info.number_of_planes,
            frame_buffer_size=scan_line * info.y_resolution,
            linear=True,
            base_address=info.phys_base_ptr,
        )

    shift = next((s for s in range(7) if 64 >> s == info.win_granularity), None)
    if shift is None:
        raise ValueError(f"unsupported window granularity {info.win_granularity} KiB")
    return GraphicDevice(
        x_resolution=info.x_resolution,
        y_resolution=info.y_resolution,
        bytes_per_scan_line=info.bytes_per_scan_line,
        bits_per_pixel=info.bits_per_pixel,
        number_of_planes=info.number_of_planes,
        frame_buffer_size=info.win_size * 1024,
        linear=False,
        base_address=_linear_address(info.win_a_segment, 0),
        bank_shift=shift,
    )