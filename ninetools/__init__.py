"""Small command-line tools: a bitcoin value calculator, an RPN evaluator and a merge-sort timer."""

__version__ = "0.1.0"