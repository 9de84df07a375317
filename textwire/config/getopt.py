"""
Command-line argument map.

Given './app --user=me --pass=123 -h' the map holds:
    0 -> './app', 1 -> '--user=me', 2 -> '--pass=123', 3 -> '-h'
and also:
    '--user' -> 'me', '--pass' -> '123', '-h' -> 'true'

options() returns the named entries alone, ready to hand to a
VariableStore or a MultiPatternSubstitutor.
"""

from typing import Dict, List, Sequence, Union

from ..text.wstring import WireString, format_items

ArgKey = Union[int, str]


class ArgMap(dict):
    """Positional and key=value view of an argument vector."""

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> 'ArgMap':
        """
        Build the map from a full argument vector (program name first).

        Args:
            argv: Arguments, argv[0] being the program name

        Returns:
            Populated ArgMap
        """
        args = cls()
        program = argv[0] if argv else None

        for arg in argv:
            tokens = WireString(arg).split_keep('=')
            if len(tokens) == 3 and tokens[1] == '=':
                args[str(tokens[0])] = tokens[2]
            elif len(tokens) == 2 and tokens[1] == '=':
                args[str(tokens[0])] = WireString('true')
            elif len(tokens) == 1 and arg != program:
                args[str(tokens[0])] = WireString('true')

        for index, arg in enumerate(argv):
            args[index] = WireString(arg)

        return args

    def size(self) -> int:
        """Number of positional arguments (argc)."""
        count = 0
        while count in self:
            count += 1
        return count

    def has(self, key: ArgKey) -> bool:
        return key in self

    def positional(self) -> List[WireString]:
        return [self[i] for i in range(self.size())]

    def options(self) -> Dict[str, WireString]:
        """Named entries only, in insertion order."""
        return {k: v for k, v in self.items() if isinstance(k, str)}

    def cmdline(self) -> str:
        """The invocation as a single space-separated string."""
        return ' '.join(self.positional())

    def str(self) -> str:
        """Render every entry as 'key=value,'."""
        return format_items(self, '\x01=\x02,')
