"""Stacks, linked lists, skip lists, binary search trees and recursion examples."""

__version__ = "0.1.0"