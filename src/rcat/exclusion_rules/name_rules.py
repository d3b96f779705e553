"""Exclusion rules matched against the base name of each directory entry."""

from os import PathLike
from pathlib import Path
from typing import AbstractSet, List, Optional, Sequence, Union

from pathspec import PathSpec

from rcat.types import PathType

from .base_rules import BaseExclusionRules

# Build artifacts, VCS/editor directories, lockfiles and ignore files.
DEFAULT_EXCLUDED_NAMES = frozenset(
    {
        "target",
        ".idea",
        ".vscode",
        ".git",
        "Cargo.lock",
        ".gitignore",
    }
)


class NameExclusionRules(BaseExclusionRules):
    """Exclusion rules combining a fixed set of names with gitignore-style patterns.

    An entry is excluded when its base name is a member of the literal name set, or
    when it matches one of the additional patterns. Patterns use .gitignore syntax
    and are compiled with the pathspec library, but they are always matched against
    the entry's base name, never against a path relative to the root. Negation
    patterns (``!keep.log``) can therefore only undo earlier patterns; they never
    re-include a name from the literal set.

    Attributes:
        excluded_names (frozenset): Names that are always skipped.
        patterns (List[str]): Additional pattern lines, in the order they were added.

    Example:
        >>> rules = NameExclusionRules()
        >>> rules.exclude("Cargo.lock")
        True
        >>> rules.exclude("Cargo.toml")
        False
        >>> rules.add_rule("build/")
        >>> rules.exclude("build", is_dir=True)
        True
        >>> rules.exclude("build")
        False
    """

    def __init__(
        self,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
        excluded_names: AbstractSet[str] = DEFAULT_EXCLUDED_NAMES,
    ) -> None:
        """Initialize NameExclusionRules.

        Args:
            rules_files: Optional path(s) to files containing .gitignore patterns.
            excluded_names: Literal base names that are always excluded.
                Defaults to DEFAULT_EXCLUDED_NAMES.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.excluded_names = frozenset(excluded_names)
        self.patterns: List[str] = []
        self._spec = PathSpec.from_lines("gitwildmatch", [])

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, name: str, is_dir: bool = False) -> bool:
        if name in self.excluded_names:
            return True
        if not self.patterns:
            return False
        if self._spec.match_file(name):
            return True
        # Directory-only patterns such as "build/" need the trailing slash to match
        return is_dir and self._spec.match_file(name + "/")

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load .gitignore-style patterns from one or more files.

        Args:
            rules_files: Path(s) to file(s) containing patterns, one per line.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                self.patterns.extend(f.read().splitlines())

        self._compile()

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore-style pattern.

        Args:
            rule: A pattern such as ``"*.pyc"``, ``"node_modules/"`` or ``"!keep.log"``.
        """
        self.patterns.append(rule)
        self._compile()

    def _compile(self) -> None:
        self._spec = PathSpec.from_lines("gitwildmatch", self.patterns)
