"""Classic data structures and algorithms: sorting, external sorting, heaps and priority queues, graphs, greedy methods, binary trees and tries."""

__version__ = "0.1.0"