import pytest
from balanced_tree import BalancedSearchTree
from balanced_tree.display import render_tree, print_tree, format_diagnostics, print_diagnostics
from balanced_tree.util import random_keys, is_ipython
import demo

def test_render_tree():
    tree = BalancedSearchTree([1, 2, 3, 4, 5, 6, 7])
    assert render_tree(tree) == "\n".join([
        "|       ┌── 7",
        "|   ┌── 6",
        "|   |   └── 5",
        "└── 4",
        "    |   ┌── 3",
        "    └── 2",
        "        └── 1",
    ])

def test_render_lopsided_tree():
    tree = BalancedSearchTree([2])
    tree.insert(1)
    tree.insert(3)
    tree.insert(4)
    assert render_tree(tree) == "\n".join([
        "|       ┌── 4",
        "|   ┌── 3",
        "└── 2",
        "    └── 1",
    ])

def test_render_empty_tree():
    assert render_tree(BalancedSearchTree()) == ""

def test_print_tree(capsys):
    tree = BalancedSearchTree([1, 2])
    text = print_tree(tree)
    assert capsys.readouterr().out == text + "\n"
    assert text == "|   ┌── 2\n└── 1"

    print_tree(tree, skip_display=True)
    assert capsys.readouterr().out == ""

def test_diagnostics_text(capsys):
    results = BalancedSearchTree([5, 3, 3, 8, 1]).collect_diagnostics()
    expected = "\n".join([
        "Is balanced: True",
        "Level Order: [3, 1, 5, 8]",
        "Pre Order: [3, 1, 5, 8]",
        "Post Order: [1, 8, 5, 3]",
        "In Order: [1, 3, 5, 8]",
    ])
    assert format_diagnostics(results) == expected
    print_diagnostics(results)
    assert capsys.readouterr().out == expected + "\n"

def test_random_keys():
    xs = random_keys(15, 100, seed=42)
    assert len(xs) == 15
    assert all(isinstance(x, int) and 0 <= x < 100 for x in xs)
    assert xs == random_keys(15, 100, seed=42)
    assert random_keys(0, 10) == []

def test_random_keys_warns_on_small_range():
    with pytest.warns(UserWarning):
        xs = random_keys(20, 5)
    assert len(BalancedSearchTree(xs)) <= 5

def test_random_keys_bad_arguments():
    with pytest.raises(ValueError):
        random_keys(-1, 10)
    with pytest.raises(ValueError):
        random_keys(5, 0)

def test_not_ipython():
    assert not is_ipython()

def test_demo(capsys):
    tree = demo.run(15, 100, seed=0)
    assert tree.is_balanced()
    assert tree.in_order()[-5:] == [101, 102, 103, 104, 105]
    assert all(k < 100 for k in tree.in_order()[:-5])
    assert capsys.readouterr().out.count("Is balanced:") == 3
