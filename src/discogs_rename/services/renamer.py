"""
File Renamer Module
Matches file paths with formatted track names and renames the files.
"""

from pathlib import Path
from typing import Sequence, Tuple, Union

from ..core.config import ERROR_MESSAGES
from ..core.exceptions import RenameError
from ..core.logger import get_logger
from ..models.rename import RenameOperation, RenamePlan

logger = get_logger("renamer")

PathLike = Union[str, Path]


def parse_file_path(file_path: PathLike) -> Tuple[Path, str, str]:
    """
    Split a file path into its directory, name, and extension.
    
    Args:
        file_path: The file path to parse
        
    Returns:
        Tuple of (directory, name, extension), e.g. ("music", "track.01", ".flac")
    """
    path = Path(file_path)
    return path.parent, path.stem, path.suffix


def build_rename_plan(
    files: Sequence[PathLike],
    names: Sequence[str],
    dry_run: bool = False
) -> RenamePlan:
    """
    Pair file paths with formatted track names by position.
    
    Each file keeps its directory and extension. Pairing stops at the end of
    the shorter sequence.
    
    Args:
        files: The file paths to rename
        names: The formatted track names
        dry_run: Whether the plan should only be displayed
        
    Returns:
        RenamePlan with one operation per pair
    """
    operations = []
    for file_path, name in zip(files, names):
        directory, _, extension = parse_file_path(file_path)
        operations.append(RenameOperation(source=Path(file_path), target=directory / f"{name}{extension}"))
    
    return RenamePlan(names=list(names), operations=operations, dry_run=dry_run)


def rename_files(plan: RenamePlan) -> RenamePlan:
    """
    Execute a rename plan in order.
    
    Nothing is touched on disk when the plan is a dry run. An existing
    target file is never overwritten.
    
    Args:
        plan: The renames to perform
        
    Returns:
        The executed plan
        
    Raises:
        RenameError: If a target exists or the rename fails
    """
    for operation in plan.operations:
        logger.info(f"{operation.source} => {operation.target}...")
        
        if plan.dry_run or operation.source == operation.target:
            continue
        
        if operation.target.exists():
            raise RenameError(f"{ERROR_MESSAGES['TARGET_EXISTS']}: {operation.target}")
        
        try:
            operation.source.rename(operation.target)
        except OSError as e:
            raise RenameError(f"Failed to rename {operation.source}: {e}") from e
    
    return plan
