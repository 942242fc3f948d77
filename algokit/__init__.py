"""Classic algorithms and data structures: strings, dynamic programming, graphs, math and trees."""

__version__ = "0.1.0"

__all__ = [
    "bst",
    "bucketing",
    "digitdp",
    "dp",
    "dsu",
    "graphs",
    "mathutils",
    "strings",
    "trie",
]