from hexinfo.canvas import (
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    HLINE,
    TEE_LEFT,
    TEE_RIGHT,
    TOP_LEFT,
    TOP_RIGHT,
    VLINE,
    Canvas,
    Cell,
    Color,
)


def test_new_canvas_is_blank():
    canvas = Canvas(4, 2)
    assert canvas.text_rows() == ["    ", "    "]
    assert canvas.cells[1][3] == Cell(" ", Color.DEFAULT, Color.DEFAULT)


def test_set_cell_accepts_codepoints_and_strings():
    canvas = Canvas(3, 1)
    canvas.set_cell(0, 0, 0x2500, Color.RED, Color.BLACK)
    canvas.set_cell(1, 0, "x", Color.GREEN, Color.BLACK)
    assert canvas.cells[0][0] == Cell(HLINE, Color.RED, Color.BLACK)
    assert canvas.cells[0][1].ch == "x"


def test_set_cell_out_of_bounds_ignored():
    canvas = Canvas(2, 2)
    for x, y in [(-1, 0), (0, -1), (2, 0), (0, 2)]:
        canvas.set_cell(x, y, "#", Color.RED, Color.BLACK)
    assert "#" not in "".join(canvas.text_rows())


def test_print_at_clips():
    canvas = Canvas(5, 1)
    canvas.print_at("hello world", 2, 0, Color.WHITE, Color.BLACK)
    assert canvas.text_rows() == ["  hel"]


def test_print_centered():
    canvas = Canvas(6, 1)
    canvas.print_centered("ab", 0, 0, 6, Color.WHITE, Color.BLACK)
    assert canvas.text_rows()[0].strip() == "ab"
    row = canvas.text_rows()[0]
    assert row.index("a") == len(row) - row.index("b") - 1


def test_print_centered_overflowing_text_starts_left():
    canvas = Canvas(10, 1)
    canvas.print_centered("abcdef", 0, 0, 2, Color.WHITE, Color.BLACK)
    assert canvas.text_rows()[0].startswith("cdef")


def test_clear_resets_cells():
    canvas = Canvas(3, 1)
    canvas.print_at("abc", 0, 0, Color.RED, Color.BLACK)
    canvas.clear()
    assert canvas.text_rows() == ["   "]


def test_draw_box_borders():
    canvas = Canvas(6, 4)
    canvas.draw_box(0, 0, 6, 4, "", Color.WHITE)
    rows = canvas.text_rows()
    assert rows[0] == TOP_LEFT + HLINE * 4 + TOP_RIGHT
    assert rows[1] == VLINE + "    " + VLINE
    assert rows[3] == BOTTOM_LEFT + HLINE * 4 + BOTTOM_RIGHT
    assert all(cell.bg == Color.BLACK for row in canvas.cells for cell in row)


def test_draw_box_covers_existing_content():
    canvas = Canvas(5, 3)
    canvas.print_at("xxxxx", 0, 1, Color.RED, Color.DEFAULT)
    canvas.draw_box(0, 0, 5, 3, "", Color.BLUE)
    assert "x" not in canvas.text_rows()[1]


def test_draw_box_title():
    canvas = Canvas(8, 3)
    canvas.draw_box(0, 0, 8, 3, "ab", Color.WHITE)
    top = canvas.text_rows()[0]
    assert TEE_LEFT + "ab" + TEE_RIGHT in top
    a_index = top.index("a")
    assert canvas.cells[0][a_index].fg == Color.WHITE | Color.BOLD
    assert canvas.cells[0][a_index - 1].fg == Color.WHITE


def test_draw_separator():
    canvas = Canvas(5, 1)
    canvas.draw_separator(0, 0, 5, Color.GREEN, Color.BLACK)
    assert canvas.text_rows() == [TEE_LEFT + HLINE * 3 + TEE_RIGHT]


def test_draw_ascii_art_centred():
    canvas = Canvas(6, 6)
    canvas.draw_ascii_art(("ab", "cd"), 0, 0, 6, 6, Color.CYAN)
    rows = canvas.text_rows()
    assert rows[2][1:3] == "ab"
    assert rows[3][1:3] == "cd"
    assert canvas.cells[2][1] == Cell("a", Color.CYAN, Color.BLACK)


def test_draw_ascii_art_clipped_to_box():
    canvas = Canvas(4, 3)
    canvas.draw_ascii_art(("xyzw", "y", "z"), 0, 0, 4, 3, Color.CYAN)
    rows = canvas.text_rows()
    assert rows[1][1:3] == "xy"
    assert "z" not in "".join(rows)
    assert "w" not in "".join(rows)