from .tree import BalancedSearchTree, Node, Diagnostics, InvalidKeyError
from .traversal import ORDERS
