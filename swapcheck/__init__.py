"""Checker, step-by-step viewer, radix walkthrough and input generator for push_swap instruction lists."""

__version__ = "0.1.0"