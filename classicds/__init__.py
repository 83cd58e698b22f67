"""Classic data structures and small value types: dates, fractions, stock
records, vectors, linked lists, hash tables, red-black trees, stacks and
queues, plus an integer expression evaluator."""

__version__ = "0.1.0"