import itertools

import pytest

from pixpaint.canvas import BLACK, BLUE, CYAN, GREEN, MAGENTA, RED, YELLOW
from pixpaint.layout import (
    Button,
    FileAction,
    Region,
    Tool,
    colour_palette,
    file_menu,
    hit_test,
    main_toolbar,
    size_palette,
)

ALL_MENUS = [main_toolbar, colour_palette, size_palette, file_menu]


def _corners(region):
    return [
        (region.x, region.y),
        (region.x + region.width, region.y),
        (region.x, region.y + region.height),
        (region.x + region.width, region.y + region.height),
    ]


def test_region_contains_edges_inclusive():
    region = Region(10, 45)
    assert region.contains((10, 45))
    assert region.contains((40, 75))
    assert not region.contains((41, 60))
    assert not region.contains((9, 60))
    assert not region.contains((20, 76))


def test_main_toolbar_actions():
    assert [b.action for b in main_toolbar()] == [Tool.PENCIL, Tool.ERASER, Tool.FILE]


def test_colour_palette_actions():
    assert [b.action for b in colour_palette()] == [
        RED, GREEN, BLUE, CYAN, MAGENTA, YELLOW, BLACK,
    ]


def test_size_palette_actions():
    assert [b.action for b in size_palette()] == [4, 8, 12, 16]


def test_file_menu_actions():
    assert [b.action for b in file_menu()] == [
        FileAction.SAVE, FileAction.NEW, FileAction.OPEN,
    ]


def test_icon_paths():
    assert [b.icon for b in main_toolbar()] == [
        "button/write.png", "button/del.png", "button/file.png",
    ]
    assert colour_palette()[0].icon == "button/colo_1.png"


@pytest.mark.parametrize(
    "buttons",
    [main_toolbar(), colour_palette(), size_palette(), file_menu()],
    ids=["toolbar", "colours", "sizes", "file"],
)
def test_regions_do_not_overlap(buttons):
    for a, b in itertools.combinations(buttons, 2):
        assert not any(b.region.contains(c) for c in _corners(a.region))
        assert not any(a.region.contains(c) for c in _corners(b.region))
    for button in buttons:
        for corner in _corners(button.region):
            assert hit_test(buttons, corner) is button


@pytest.mark.parametrize("menu", ALL_MENUS)
def test_hit_test_finds_each_button(menu):
    buttons = menu()
    for button in buttons:
        centre = (
            button.region.x + button.region.width // 2,
            button.region.y + button.region.height // 2,
        )
        assert hit_test(buttons, centre) is button


def test_hit_test_misses():
    assert hit_test(colour_palette(), (0, 0)) is None
    assert hit_test(main_toolbar(), (500, 500)) is None
    assert hit_test([], (10, 10)) is None


def test_hit_test_toolbar_corner():
    hit = hit_test(main_toolbar(), (80, 0))
    assert hit.action is Tool.FILE


def test_hit_test_returns_first_match():
    first = Button(Region(0, 0), "a.png", 1.0, 1)
    second = Button(Region(0, 0), "b.png", 1.0, 2)
    assert hit_test([first, second], (5, 5)) is first


def test_menus_are_fresh_lists():
    one = colour_palette()
    one.clear()
    assert len(colour_palette()) == 7