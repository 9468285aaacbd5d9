"""
Command-line surface: argument parsing and output rendering
"""
