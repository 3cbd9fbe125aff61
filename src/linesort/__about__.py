__title__ = "linesort"
__version__ = "0.1.0"
__description__ = "Sort lines of text by whole line or column: lexicographic, numeric, human-numeric or month order"
