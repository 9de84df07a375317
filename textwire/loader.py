"""Variable and rule file loading with validation."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml

from textwire.config.ini import IniDocument
from textwire.exceptions import ConfigParseError, ConfigValidationError, ValidationError
from textwire.variables.store import VariableStore, to_text
from textwire.variables.substitution import MultiPatternSubstitutor


class PreservingLoader(yaml.SafeLoader):
    """YAML loader that keeps 'on', 'off', 'yes', 'no' as strings instead of booleans."""
    pass


# Drop the implicit bool resolvers for words starting with o/O/y/Y/n/N so that
# values such as 'on' survive as the literal text users typed
PreservingLoader.yaml_implicit_resolvers = dict(PreservingLoader.yaml_implicit_resolvers)
for _first in 'oOyYnN':
    if _first in PreservingLoader.yaml_implicit_resolvers:
        PreservingLoader.yaml_implicit_resolvers[_first] = [
            (tag, regexp) for tag, regexp in PreservingLoader.yaml_implicit_resolvers[_first]
            if tag != 'tag:yaml.org,2002:bool'
        ]

YAML_SUFFIXES = {'.yaml', '.yml'}
JSON_SUFFIXES = {'.json'}
INI_SUFFIXES = {'.ini', '.cfg', '.conf'}


class VariablesLoader:
    """
    Loads name -> value tables from YAML, JSON or INI files.

    Nested mappings flatten to dotted names ({'db': {'host': 'x'}} becomes
    'db.host'), matching the canonical keys of $db.host references.
    """

    def __init__(self):
        """Initialize loader."""
        self.errors: List[ValidationError] = []

    def load(self, path: Path) -> Dict[str, str]:
        """
        Load and validate a variables file.

        Args:
            path: File to read; the format is chosen by suffix

        Returns:
            Flat name -> string mapping in file order

        Raises:
            ConfigValidationError: If the file cannot be read or has invalid entries
        """
        self.errors = []
        path = Path(path)
        data = self._read(path)

        if not self.errors and not isinstance(data, dict):
            self._add_error("Variables file must contain a mapping", str(path))

        if self.errors:
            self._raise_validation_errors()

        result: Dict[str, str] = {}
        self._flatten(data, '', result)

        if self.errors:
            self._raise_validation_errors()

        return result

    def load_into(self, path: Path, store: VariableStore) -> VariableStore:
        """Load a variables file and assign every entry into store."""
        store.update(self.load(path))
        return store

    def load_rules(self, path: Path) -> MultiPatternSubstitutor:
        """
        Load a substitution rule table, keeping file order as priority order.

        Args:
            path: YAML, JSON or INI file mapping pattern -> replacement

        Returns:
            Substitutor with the rules registered
        """
        return MultiPatternSubstitutor(self.load(path))

    def _read(self, path: Path) -> Any:
        if not path.exists():
            self._add_error(f"File not found: {path}")
            return None

        suffix = path.suffix.lower()
        try:
            text = path.read_text(encoding='utf-8')
        except OSError as e:
            self._add_error(f"Failed to read file: {e}")
            return None

        if suffix in JSON_SUFFIXES:
            try:
                return json.loads(text)
            except json.JSONDecodeError as e:
                self._add_error(f"Invalid JSON: {e}")
                return None

        if suffix in INI_SUFFIXES:
            try:
                return dict(IniDocument.from_text(text))
            except ConfigParseError as e:
                self.errors.extend(e.errors)
                return None

        if suffix and suffix not in YAML_SUFFIXES:
            self._add_error(f"Unsupported file type '{suffix}'", str(path))
            return None

        try:
            data = yaml.load(text, Loader=PreservingLoader)
        except yaml.YAMLError as e:
            self._add_error(f"Invalid YAML: {e}")
            return None
        # An empty document is an empty table
        return {} if data is None else data

    def _flatten(self, data: Dict[Any, Any], prefix: str, out: Dict[str, str]):
        """Flatten nested mappings into dotted names."""
        for key, value in data.items():
            name = f"{prefix}{key}"
            if not isinstance(key, (str, int)) or isinstance(key, bool) or str(key) == '':
                self._add_error(f"Invalid variable name {key!r}", prefix.rstrip('.'))
                continue
            if isinstance(value, dict):
                self._flatten(value, f"{name}.", out)
            elif isinstance(value, (list, tuple)):
                self._add_error("Lists are not supported as variable values", name)
            elif value is None:
                out[name] = ''
            else:
                out[name] = to_text(value)

    def _add_error(self, message: str, path: str = "", exit_code: int = 2):
        """Add validation error."""
        self.errors.append(ValidationError(message, path, exit_code))

    def _raise_validation_errors(self):
        """Raise ConfigValidationError with accumulated errors."""
        raise ConfigValidationError(self.errors)


def load_variables(path: Path, store: Optional[VariableStore] = None) -> VariableStore:
    """Load a variables file into store (a new store when None)."""
    return VariablesLoader().load_into(path, store if store is not None else VariableStore())


def load_rules(path: Path) -> MultiPatternSubstitutor:
    """Load a substitution rule table from a YAML, JSON or INI file."""
    return VariablesLoader().load_rules(path)
