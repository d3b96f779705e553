from abc import ABC, abstractmethod
from typing import Sequence, Union

from rcat.types import PathType


class BaseExclusionRules(ABC):
    """Interface consulted once per directory entry during traversal.

    Decisions are made from the entry's base name alone, never from its full path.
    Excluding a directory prunes everything below it.

    Example:
        >>> from rcat.exclusion_rules.name_rules import NameExclusionRules
        >>> rules = NameExclusionRules()
        >>> rules.exclude(".git", is_dir=True)
        True
        >>> rules.add_rule("*.pyc")
        >>> rules.exclude("module.pyc")
        True
        >>> rules.exclude("module.py")
        False
    """

    @abstractmethod
    def exclude(self, name: str, is_dir: bool = False) -> bool:
        """Tell whether the entry called ``name`` is skipped.

        Args:
            name: Base name of the file or directory.
            is_dir: Whether the entry is a directory. Directory-only patterns
                such as ``build/`` apply only when this is True.
        """

    @abstractmethod
    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns listed in one or more rules files.

        Raises:
            FileNotFoundError: If a rules file does not exist.
        """

    @abstractmethod
    def add_rule(self, rule: str) -> None:
        """Append a single pattern, e.g. ``"*.pyc"``."""
