"""
numguess - a text-command number guessing game.

Type commands such as "start", "guess 5", "save" and "load" into a terminal;
the game keeps a secret number within a range and answers each guess with
too low, too high or correct.
"""

__version__ = "0.1.0"
