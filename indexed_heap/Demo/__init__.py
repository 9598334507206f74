"""
Demonstration driver: `python -m indexed_heap.Demo.demo --help`
"""
