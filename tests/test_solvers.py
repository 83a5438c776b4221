import io

from eldrow.config import SolverConfig
from eldrow.datasets import parse_puzzle
from eldrow.solvers import build_tree, count_leaves, iter_paths, print_paths


def _solve(puzzle_lines, dictionary):
    pz = parse_puzzle(puzzle_lines)
    root = build_tree(pz, dictionary)
    out = io.StringIO()
    n = print_paths(root, pz.num_rows, out)
    assert n == count_leaves(root, pz.num_rows)
    return out.getvalue()


def test_all_green_solution_is_single_path():
    out = _solve(["apple", "ggggg"], ["apple", "allow", "below"])
    assert out == "apple\n"


def test_all_green_rows_round_trip():
    out = _solve(["apple", "ggggg", "ggggg"], ["allow", "apple", "below"])
    assert out == "apple\n"


def test_gray_row_forbids_solution_letters():
    dictionary = ["crisp", "mango", "stack", "melon", "tulip"]
    assert _solve(["melon", "-----"], dictionary) == "melon crisp\nmelon stack\n"


def test_gray_rows_accumulate_along_path():
    dictionary = ["crisp", "stack", "tulip", "dumpy", "bawdy"]
    out = _solve(["melon", "-----", "-----"], dictionary)
    assert out == "melon crisp bawdy\nmelon bawdy crisp\n"


def test_green_tiles_pin_letters():
    dictionary = ["metal", "merit", "mercy", "melon", "medic", "memos"]
    out = _solve(["melon", "gg---"], dictionary)
    assert out == "melon merit\nmelon mercy\nmelon medic\n"


def test_yellow_tile_against_solution():
    dictionary = ["lucky", "nasty", "ozone", "eight", "mango"]
    out = _solve(["melon", "y----"], dictionary)
    assert out == "melon lucky\nmelon nasty\nmelon eight\n"


def test_row_without_candidates_prints_nothing():
    dictionary = ["crisp", "stack", "melon"]
    assert _solve(["melon", "-----", "ggggg"], dictionary) == ""


def test_dead_branches_are_pruned_silently():
    pz = parse_puzzle(["melon", "-----", "-----"])
    root = build_tree(pz, ["crisp", "stack", "tulip", "dumpy", "bawdy"])
    # "stack" matches row 1 but nothing can follow it
    assert [c.word for c in root.children] == ["crisp", "stack", "bawdy"]
    stack = root.children[1]
    assert stack.children == []
    assert list(iter_paths(root, pz.num_rows)) == [
        ("melon", "crisp", "bawdy"),
        ("melon", "bawdy", "crisp"),
    ]


def test_children_get_independent_constraints():
    pz = parse_puzzle(["melon", "-----", "-----", "-----"])
    root = build_tree(pz, ["crisp", "bawdy", "thumb"])
    crisp, bawdy = root.children[0], root.children[1]
    assert crisp.con is not bawdy.con
    assert set("crisp") <= crisp.con.cannot_be
    assert not set("bawdy") & crisp.con.cannot_be
    assert set("melon") <= crisp.con.cannot_be


def test_leaves_drop_constraints():
    pz = parse_puzzle(["melon", "-----"])
    root = build_tree(pz, ["crisp"])
    leaf = root.children[0]
    assert leaf.is_leaf and leaf.con is None
    assert not root.is_leaf


def test_sibling_order_follows_dictionary_order():
    dictionary = ["crisp", "mango", "stack"]
    forward = _solve(["melon", "-----"], dictionary)
    backward = _solve(["melon", "-----"], list(reversed(dictionary)))
    assert forward.splitlines() == list(reversed(backward.splitlines()))


def test_output_is_deterministic():
    dictionary = ["crisp", "stack", "tulip", "dumpy", "bawdy"]
    runs = {_solve(["melon", "-----", "-----"], dictionary) for _ in range(3)}
    assert len(runs) == 1


def test_verbose_trace(caplog):
    pz = parse_puzzle(["melon", "-----"])
    with caplog.at_level("DEBUG", logger="eldrow"):
        build_tree(pz, ["crisp"], SolverConfig(verbose=True))
    assert "Running solve_subtree: 1, melon" in caplog.text
    assert "Running solve_subtree: 2, crisp" in caplog.text
    assert "cannot_be: e l m n o" in caplog.text


def test_short_dictionary_words_never_match():
    # "cat" has no letter for the green tile at position 4
    assert _solve(["melon", "----g"], ["cat", "stick"]) == ""


def test_short_words_cannot_become_parents():
    assert _solve(["melon", "-----", "----g"], ["tick", "brash"]) == ""
