"""Builds a tree from random keys, unbalances it with a run of large keys, then rebalances it"""
import argparse
from balanced_tree import BalancedSearchTree
from balanced_tree.display import print_tree, print_diagnostics
from balanced_tree.util import random_keys

def run(length: int, max_value: int, seed: int | None = None):
    tree = BalancedSearchTree(random_keys(length, max_value, seed))
    print_tree(tree)
    print_diagnostics(tree.collect_diagnostics())

    for key in range(max_value + 1, max_value + 6):
        tree.insert(key)
    print_tree(tree)
    print_diagnostics(tree.collect_diagnostics())

    tree.rebalance()
    print_tree(tree)
    print_diagnostics(tree.collect_diagnostics())
    return tree

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--length", type=int, default=15)
    parser.add_argument("--max-value", type=int, default=100)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()
    run(args.length, args.max_value, args.seed)
