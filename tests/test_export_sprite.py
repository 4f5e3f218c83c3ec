"""
Tests for the command-line sprite exporter
"""

import pytest
from PIL import Image

from pokepic.export_sprite import build_parser, main
from tests.helpers import bits_to_bytes


@pytest.fixture
def rom_path(tmp_path, solid_sprite_bits):
    path = tmp_path / "test.gb"
    path.write_bytes(b"\xAA" * 0x10 + bits_to_bytes(solid_sprite_bits) + b"\xFF" * 8)
    return path


def run(rom, tmp_path, *extra):
    return main([str(rom), "--log-dir", str(tmp_path / "logs"), *extra])


def test_parses_hex_offset():
    args = build_parser().parse_args(["rom.gb", "--offset", "0x4000"])
    assert args.offset == 0x4000
    assert args.placement == "top-left"


def test_writes_png(rom_path, tmp_path):
    output = tmp_path / "sprite.png"
    assert run(rom_path, tmp_path, "--offset", "0x10", "--output", str(output)) == 0

    with Image.open(output) as img:
        assert img.size == (56, 56)
        rgb = img.convert("RGB")
        assert rgb.getpixel((0, 0)) == (170, 170, 170)
        assert rgb.getpixel((8, 8)) == (255, 255, 255)
    assert (tmp_path / "logs" / "pokepic.log").exists()


def test_scaled_battle_png(rom_path, tmp_path):
    output = tmp_path / "battle.png"
    code = run(
        rom_path, tmp_path,
        "--offset", "16", "--output", str(output),
        "--placement", "battle", "--scale", "2",
    )
    assert code == 0
    with Image.open(output) as img:
        assert img.size == (112, 112)
        assert img.convert("RGB").getpixel((24 * 2, 48 * 2)) == (170, 170, 170)


def test_text_output(rom_path, tmp_path, capsys):
    assert run(rom_path, tmp_path, "--offset", "0x10", "--text") == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 56
    assert lines[0] == "▨" * 8 + "□" * 48


def test_decode_error_returns_failure(rom_path, tmp_path):
    # Offset 0 points at 0xAA: height 10, width 10
    assert run(rom_path, tmp_path, "--offset", "0", "--text") == 1


def test_missing_rom_returns_failure(tmp_path):
    assert run(tmp_path / "missing.gb", tmp_path, "--text") == 1


def test_offset_past_end_returns_failure(rom_path, tmp_path):
    assert run(rom_path, tmp_path, "--offset", "0x1000", "--text") == 1


def test_log_file_names_rom_and_offset(rom_path, tmp_path):
    output = tmp_path / "sprite.png"
    assert run(rom_path, tmp_path, "--offset", "0x10", "--output", str(output)) == 0

    log_text = (tmp_path / "logs" / "pokepic.log").read_text(encoding="utf-8")
    assert f"Exporting sprite at 0x10 from {rom_path}" in log_text
    assert f"Sprite 0x10 of {rom_path} exported to {output}" in log_text
