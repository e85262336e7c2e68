"""Classic containers and algorithms: hash map, red-black tree map and set, vector, stack, sorted vector, linked list, sorts."""

__version__ = "0.1.0"

__all__ = [
    "hashing",
    "sorting",
    "strings",
    "textstream",
    "hash_map",
    "rb_tree",
    "tree_map",
    "vector",
    "stack",
    "sorted_vector",
    "slist",
]