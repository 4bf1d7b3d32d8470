"""
Discogs Rename CLI Module
Command-line interface for renaming music files from Discogs track listings.
"""

import argparse
import sys
from typing import List, Optional

from ..core.config import PROJECT_NAME, PROJECT_VERSION, PROJECT_DESCRIPTION, RENAME_CONFIG
from ..core.exceptions import DiscogsRenameError
from ..core.logger import setup_logging
from ..models.rename import RenameOptions
from ..services.rename_service import RenameService
from .display import DisplayManager


class DiscogsRenameCLI:
    """Main CLI class for Discogs Rename."""
    
    def __init__(self, service: Optional[RenameService] = None, display_manager: Optional[DisplayManager] = None):
        """Initialize the CLI."""
        self.service = service
        self.display_manager = display_manager or DisplayManager()
    
    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog=PROJECT_NAME,
            description=f"{PROJECT_DESCRIPTION} v{PROJECT_VERSION}",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s https://www.discogs.com/release/1209459 *.flac --join-multi
  %(prog)s https://www.discogs.com/release/987443 cd2/*.mp3 --disc 2 --mix --dryrun
            """
        )
        
        parser.add_argument(
            '--version',
            action='version',
            version=f'{PROJECT_NAME} {PROJECT_VERSION}'
        )
        parser.add_argument(
            'url',
            help='The Discogs release URL to use'
        )
        parser.add_argument(
            'file',
            nargs='+',
            help='The file (track) to rename'
        )
        parser.add_argument(
            '--mix',
            action='store_true',
            help='Include artist in file name as part of a multi-artist mix'
        )
        parser.add_argument(
            '--disc',
            help='Disc number. Required for multi-disc albums'
        )
        parser.add_argument(
            '--ignore-count',
            action='store_true',
            help='Ignore a mismatch in file/track count'
        )
        parser.add_argument(
            '--join-multi',
            action='store_true',
            help='Join multi-part song titles into a single title'
        )
        parser.add_argument(
            '--join-string',
            default=RENAME_CONFIG["JOIN_STRING"],
            help='String to use when joining multi-part song titles (default: a space)'
        )
        parser.add_argument(
            '--dryrun',
            action='store_true',
            help="Show all output like normal, but don't actually rename files"
        )
        parser.add_argument(
            '--debug',
            action='store_true',
            help='Output debug-level details'
        )
        
        return parser
    
    @staticmethod
    def options_from_args(parsed_args: argparse.Namespace) -> RenameOptions:
        """Build rename options from parsed command-line arguments."""
        return RenameOptions(
            disc=parsed_args.disc,
            join_multi_parts=parsed_args.join_multi,
            join_separator=parsed_args.join_string,
            mix=parsed_args.mix,
            ignore_count=parsed_args.ignore_count,
            dry_run=parsed_args.dryrun,
        )
    
    def run(self, args: List[str] = None):
        """Run the CLI with given arguments."""
        parser = self.create_parser()
        parsed_args = parser.parse_args(args)
        
        if parsed_args.debug:
            setup_logging(level="DEBUG")
        
        options = self.options_from_args(parsed_args)
        
        try:
            service = self.service or RenameService()
            plan = service.plan(parsed_args.url, parsed_args.file, options)
            for warning in plan.warnings:
                self.display_manager.display_warning(warning)
            self.display_manager.display_rename_plan(plan)
            service.execute(plan)
            self.display_manager.display_summary(plan)
        except KeyboardInterrupt:
            self.display_manager.console.print("\n[yellow]⚠[/yellow] Operation cancelled by user.")
            sys.exit(1)
        except DiscogsRenameError as e:
            self.display_manager.display_error(str(e))
            sys.exit(1)
