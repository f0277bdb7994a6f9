"""Classic algorithm exercises on numbers, sequences, strings and linked lists, with a command line front end."""

__version__ = "0.1.0"