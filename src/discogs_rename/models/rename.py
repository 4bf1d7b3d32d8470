"""
Rename request and result models.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..core.config import RENAME_CONFIG


@dataclass
class RenameOptions:
    """User intents for a rename run."""
    disc: Optional[str] = None
    join_multi_parts: bool = False
    join_separator: str = RENAME_CONFIG["JOIN_STRING"]
    mix: bool = False
    ignore_count: bool = False
    dry_run: bool = False


@dataclass(frozen=True)
class RenameOperation:
    """A single file rename."""
    source: Path
    target: Path


@dataclass
class RenamePlan:
    """Ordered renames produced for one release."""
    names: List[str] = field(default_factory=list)
    operations: List[RenameOperation] = field(default_factory=list)
    dry_run: bool = False
    warnings: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.operations)
