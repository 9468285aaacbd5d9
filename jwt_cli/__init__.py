"""
Command-line tool to decode, validate and encode JSON Web Tokens
"""
__version__ = "1.0.0"
