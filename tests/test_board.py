from quizboard.board import assemble, build_board, category_axis
from quizboard.models import ClueRecord

POINTS = [100, 200, 300, 400, 500]


def _csv(rows):
    return "Category,Points,Clue,Answer\n" + "".join(f"{c},{p},{q},{a}\n" for c, p, q, a in rows)


def test_end_to_end_scenario():
    board = build_board(
        "Category,Points,Clue,Answer\n"
        "Art,100,What color is the sky?,Blue\n"
        "Art,200,Name a primary color,Red\n"
    )
    assert board.categories[0] == "Art"
    assert board.lookup["Art"][100].clue_text == "What color is the sky?"
    assert board.lookup["Art"][100].answer_text == "Blue"
    assert board.lookup["Art"][300] is None
    assert board.point_values == POINTS


def test_shape_is_always_six_by_five():
    for text in ("", "Category,Points\n", _csv([("A", 100, "q", "a")]), "no,usable\ncolumns,here\n"):
        board = build_board(text)
        assert len(board.categories) == 6
        assert board.point_values == POINTS
        assert sum(len(cells) for cells in board.lookup.values()) == 30
        assert all(list(cells) == POINTS for cells in board.lookup.values())


def test_no_usable_columns_gives_placeholder_board():
    board = build_board("foo,bar\n1,2\n")
    assert board.categories == [f"Category {k}" for k in range(1, 7)]
    assert board.clue_count == 0


def test_category_padding():
    board = build_board(_csv([("A", 100, "q", "a"), ("B", 100, "q", "a"), ("C", 100, "q", "a")]))
    assert board.categories == ["A", "B", "C", "Category 4", "Category 5", "Category 6"]
    assert all(clue is None for clue in board.column("Category 4"))


def test_category_truncation():
    rows = [(f"C{i}", 100, f"q{i}", "a") for i in range(1, 9)]
    board = build_board(_csv(rows))
    assert board.categories == ["C1", "C2", "C3", "C4", "C5", "C6"]
    assert "C7" not in board.lookup
    assert "C8" not in board.lookup
    placed = [clue.clue_text for cells in board.lookup.values() for clue in cells.values() if clue]
    assert "q7" not in placed and "q8" not in placed


def test_first_occurrence_wins():
    board = build_board(_csv([("Art", 100, "first", "a"), ("Art", 100, "second", "b")]))
    assert board.lookup["Art"][100].clue_text == "first"


def test_off_axis_points_excluded():
    board = build_board(_csv([("Art", 150, "odd", "a"), ("Art", 100, "ok", "a")]))
    placed = [clue.clue_text for cells in board.lookup.values() for clue in cells.values() if clue]
    assert placed == ["ok"]


def test_category_axis_counts_rows_with_bad_points():
    board = build_board(_csv([("Bad", 150, "q", "a"), ("Good", 100, "q", "a")]))
    assert board.categories[:2] == ["Bad", "Good"]
    assert all(clue is None for clue in board.column("Bad"))


def test_empty_clue_still_occupies_cell():
    board = build_board("Category,Points,Clue,Answer\nArt,100,,\n")
    assert board.lookup["Art"][100] is not None
    assert board.lookup["Art"][100].clue_text == ""


def test_quoted_fields_flow_through():
    board = build_board('Catagory,Points,Clue,Answer\nArt,100,"Red, white, and ""blue""",Flag\n')
    assert board.lookup["Art"][100].clue_text == 'Red, white, and "blue"'


def test_idempotent():
    text = _csv([("A", 100, "q", "a"), ("B", 300, "q2", "a2")])
    assert build_board(text) == build_board(text)


def test_assemble_directly():
    records = [
        ClueRecord(category="X", points=200, clue_text="x"),
        ClueRecord(category="Y", points=500, clue_text="y"),
    ]
    board = assemble(records, ["X", "", "Y", "X"])
    assert board.categories[:3] == ["X", "Y", "Category 3"]
    assert board.cell("X", 200).clue_text == "x"
    assert board.column("Y")[-1].clue_text == "y"
    assert board.clue_count == 2


def test_category_axis_stops_at_six():
    assert category_axis(["a", "b", "a", "c", "d", "e", "f", "g"]) == ["a", "b", "c", "d", "e", "f"]


def test_placeholder_skips_names_already_on_axis():
    board = build_board("Category,Points,Clue\nA,100,q\nB,100,q\nCategory 4,100,q\n")
    assert board.categories == ["A", "B", "Category 4", "Category 5", "Category 6", "Category 7"]
    assert len(set(board.categories)) == 6
    assert sum(len(cells) for cells in board.lookup.values()) == 30
    assert board.lookup["Category 4"][100].clue_text == "q"
