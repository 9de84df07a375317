"""Configuration collaborators: INI documents and command-line argument maps."""

from .getopt import ArgMap
from .ini import IniDocument

__all__ = ['ArgMap', 'IniDocument']
