"""Classic algorithm and data-structure exercises: searching, sorting, containers, graphs, backtracking and puzzle solvers."""

__version__ = "0.1.0"