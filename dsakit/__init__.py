"""Classic data structures and algorithms: sorting, arrays, linked lists, trees, graphs and primes."""

__version__ = "0.1.0"

__all__ = ["arrays", "graphs", "linked_list", "primes", "sorting", "stacks", "trees"]