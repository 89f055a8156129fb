"""
Sports Trivia Games

Player guessing and stat comparison games driven by schema-validated CSV
player files, with optional season stats from the MLB Stats API.
"""

__version__ = "1.0.0"
