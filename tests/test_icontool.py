import struct

import pygame
import pytest

from afterburn.icontool import encode_ico, main, save_ico

HEADER = 6
ENTRY = 16
INFO = 40


def _entry(data, index):
    start = HEADER + index * ENTRY
    return struct.unpack("<BBBBHHII", data[start:start + ENTRY])


def _surface(size, color):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


def test_header_names_icon_resource():
    data = encode_ico([_surface((4, 2), (0, 0, 0))])
    assert struct.unpack("<HHH", data[:HEADER]) == (0, 1, 1)


def test_entry_describes_image():
    data = encode_ico([_surface((4, 2), (0, 0, 0))])
    width, height, colors, reserved, planes, bpp, size, offset = _entry(data, 0)
    assert (width, height, colors, reserved, planes, bpp) == (4, 2, 0, 0, 1, 24)
    assert offset == HEADER + ENTRY
    assert len(data) == offset + size


def test_offsets_chain_for_several_images():
    data = encode_ico([_surface((4, 4), (1, 2, 3)), _surface((8, 8), (4, 5, 6))])
    first = _entry(data, 0)
    second = _entry(data, 1)
    assert second[7] == first[7] + first[6]
    assert len(data) == second[7] + second[6]


def test_info_header_doubles_height():
    data = encode_ico([_surface((4, 3), (0, 0, 0))])
    offset = _entry(data, 0)[7]
    info = struct.unpack("<IiiHH", data[offset:offset + 16])
    assert info == (INFO, 4, 6, 1, 24)


def test_pixels_written_blue_green_red():
    surface = _surface((4, 1), (0, 0, 0))
    surface.set_at((0, 0), (10, 20, 30))
    data = encode_ico([surface])
    start = _entry(data, 0)[7] + INFO
    assert data[start:start + 3] == bytes((30, 20, 10))


def test_and_mask_marks_magenta_pixels():
    data = encode_ico([_surface((8, 1), (255, 0, 255))])
    assert data[-4:] == b"\xff\x00\x00\x00"


def test_and_mask_empty_for_opaque_pixels():
    data = encode_ico([_surface((8, 1), (0, 0, 0))])
    assert data[-4:] == bytes(4)


def test_eight_bit_image_carries_palette():
    surface = pygame.Surface((8, 1), depth=8)
    surface.set_palette_at(1, (1, 2, 3))
    data = encode_ico([surface])
    bpp, size, offset = _entry(data, 0)[5:8]
    assert bpp == 8
    assert len(data) == offset + size
    palette = offset + INFO
    assert data[palette:palette + 4] == bytes(4)
    assert data[palette + 4:palette + 8] == bytes((3, 2, 1, 0))


def test_no_images_rejected():
    with pytest.raises(ValueError):
        encode_ico([])


def test_save_ico_writes_encoded_bytes(tmp_path):
    surfaces = [_surface((4, 4), (9, 8, 7))]
    path = tmp_path / "a.ico"
    save_ico(path, surfaces)
    assert path.read_bytes() == encode_ico(surfaces)


def test_main_needs_arguments():
    assert main(["only.ico"]) == 1


def test_main_rejects_unknown_option(tmp_path):
    assert main([str(tmp_path / "a.ico"), "-x", "b.bmp"]) == 1


def test_main_reports_missing_bitmap(tmp_path):
    assert main([str(tmp_path / "a.ico"), str(tmp_path / "missing.bmp")]) == 1


def test_main_converts_bitmap(tmp_path):
    bitmap = tmp_path / "pic.bmp"
    pygame.image.save(_surface((4, 4), (1, 2, 3)), str(bitmap))
    icon = tmp_path / "out.ico"
    assert main([str(icon), str(bitmap)]) == 0
    data = icon.read_bytes()
    assert struct.unpack("<HHH", data[:HEADER]) == (0, 1, 1)


def test_main_writes_resource_script(tmp_path):
    bitmap = tmp_path / "pic.bmp"
    pygame.image.save(_surface((4, 4), (1, 2, 3)), str(bitmap))
    icon = tmp_path / "out.ico"
    assert main([str(icon), "-r", str(bitmap)]) == 0
    assert (tmp_path / "out.rc").read_text() == f"allegro_icon ICON {icon}"