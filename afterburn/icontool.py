"""Convert bitmaps into a Windows .ico file, optionally with a resource script."""

import os
import struct
import subprocess
import sys

import pygame

ICON_MAX = 16
_HEADER_SIZE = 6
_ENTRY_SIZE = 16
_INFO_SIZE = 40
_PALETTE_SIZE = 256
_MAGENTA = (255, 0, 255)

USAGE = """
Windows icon converter
Usage: icontool icon [-r[o]] bitmap [bitmap...]
Options:
   -r      output .rc file for the icon
   -ro     call the resource compiler on the .rc file
"""


def _layout(surface):
    width, height = surface.get_size()
    bpp = 8 if surface.get_bitsize() == 8 else 24
    row = ((width * bpp // 8 + 3) // 4) * 4
    mask_row = (((width + 7) // 8 + 3) // 4) * 4
    size = height * (row + mask_row) + _INFO_SIZE
    if bpp == 8:
        size += _PALETTE_SIZE * 4
    return bpp, row, mask_row, size


def _mask_value(surface):
    key = surface.get_colorkey()
    if key is not None:
        return surface.map_rgb(key)
    if surface.get_bitsize() == 8:
        return 0
    return surface.map_rgb(_MAGENTA)


def _image(surface):
    width, height = surface.get_size()
    bpp, row, mask_row, size = _layout(surface)
    out = bytearray(
        struct.pack("<IiiHHIIiiII", _INFO_SIZE, width, height * 2, 1, bpp, 0, size, 0, 0, 0, 0)
    )
    if bpp == 8:
        palette = surface.get_palette()
        out += bytes(4)  # colour 0 is black so the XOR mask works
        for index in range(1, _PALETTE_SIZE):
            if index < len(palette):
                color = palette[index]
                out += bytes((color.b, color.g, color.r, 0))
            else:
                out += bytes(4)

    for y in reversed(range(height)):
        line = bytearray()
        for x in range(width):
            if bpp == 8:
                line.append(surface.get_at_mapped((x, y)) & 0xFF)
            else:
                color = surface.get_at((x, y))
                line += bytes((color.b, color.g, color.r))
        out += line + bytes(row - len(line))

    mask = _mask_value(surface)
    for y in reversed(range(height)):
        line = bytearray()
        for byte_x in range((width + 7) // 8):
            bits = 0
            for bit in range(8):
                x = byte_x * 8 + bit
                if x < width and surface.get_at_mapped((x, y)) == mask:
                    bits |= 0x80 >> bit
            line.append(bits)
        out += line + bytes(mask_row - len(line))
    return bytes(out)


def encode_ico(surfaces):
    """Return the bytes of an .ico file holding every surface in *surfaces*."""
    surfaces = list(surfaces)
    if not surfaces:
        raise ValueError("an icon needs at least one image")
    out = bytearray(struct.pack("<HHH", 0, 1, len(surfaces)))
    offset = _HEADER_SIZE + len(surfaces) * _ENTRY_SIZE
    for surface in surfaces:
        width, height = surface.get_size()
        bpp, _, _, size = _layout(surface)
        out += struct.pack("<BBBBHHII", width & 0xFF, height & 0xFF, 0, 0, 1, bpp, size, offset)
        offset += size
    for surface in surfaces:
        out += _image(surface)
    return bytes(out)


def save_ico(path, surfaces):
    """Write the surfaces as an .ico file at *path*."""
    data = encode_ico(surfaces)
    with open(path, "wb") as handle:
        handle.write(data)


def _usage():
    print(USAGE)
    return 1


def main(argv=None):
    """Run the converter; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        return _usage()
    icon = args[0]
    create_rc = call_windres = False
    surfaces = []
    for arg in args[1:]:
        if arg.startswith("-"):
            if arg[1:2] != "r":
                return _usage()
            create_rc = True
            if arg[2:3] == "o":
                call_windres = True
            continue
        try:
            surfaces.append(pygame.image.load(arg))
        except (pygame.error, OSError, FileNotFoundError):
            print(f"Error reading {arg}.")
            return 1
        if len(surfaces) == ICON_MAX:
            break
    if not surfaces:
        return _usage()

    try:
        save_ico(icon, surfaces)
    except OSError:
        print(f"Error writing {icon}.")
        return 1

    if create_rc:
        root = os.path.splitext(icon)[0]
        rc_name = root + ".rc"
        with open(rc_name, "w", encoding="utf-8") as handle:
            handle.write(f"allegro_icon ICON {icon}")
        if call_windres:
            res_name = root + ".res"
            try:
                subprocess.run(["windres", "-O", "coff", "-o", res_name, "-i", rc_name],
                               check=False)
            except OSError:
                pass
            for name in (icon, rc_name):
                try:
                    os.remove(name)
                except OSError:
                    pass
    return 0


if __name__ == "__main__":
    sys.exit(main())