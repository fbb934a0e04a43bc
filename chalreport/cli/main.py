"""Main CLI entry point for chalreport"""

import sys
import argparse
from typing import List, Optional

from dotenv import load_dotenv

from ..__version__ import __version__
from ..core.schema import TESTED_STYLES, VARIANTS, get_schema
from ..utils.config import Config
from ..utils.exceptions import ChalreportError, ValidationError
from ..utils.logger import Logger, logger, LEVELS
from .commands import build_report, show_report

load_dotenv(override=True)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI"""
    
    parser = argparse.ArgumentParser(
        prog='chalreport',
        description='Generate a markdown table of CTF challenges from challenge.yml / tested.yml',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Write README.md for the challenges under the current directory
  chalreport
  
  # Scan another tree and write the report next to it
  chalreport --dir-path challenges/ --output-path challenges/
  
  # Extended layout (tester and tested URL columns) with ✅/❌ marks
  chalreport --variant extended --tested-style glyph
  
  # Look at the table without writing anything
  chalreport --preview --tablefmt grid
  
  # Dump every parsed record as JSON
  chalreport --preview --tablefmt json
"""
    )
    
    # === input files ===
    parser.add_argument(
        '--chall-yml',
        dest='challenge_file',
        default=Config.get_challenge_file(),
        help='Challenge metadata file in each directory, e.g. challenge.yml, task.yml (default: %(default)s)'
    )
    parser.add_argument(
        '--tested-yml',
        dest='tested_file',
        default=Config.get_tested_file(),
        help='Tested-status file in each directory (default: %(default)s)'
    )
    parser.add_argument(
        '--dir-path',
        default=Config.DIR_PATH,
        help='Directory to scan (default: %(default)s)'
    )
    parser.add_argument(
        '--max-depth',
        type=int,
        help='Do not descend more than this many levels below --dir-path'
    )
    
    # === output ===
    parser.add_argument(
        '--output-path',
        default=Config.OUTPUT_PATH,
        help='Directory to write the report into (default: %(default)s)'
    )
    parser.add_argument(
        '--output-name',
        help='Report file name (default: README.md, or TESTED.md with --variant extended)'
    )
    parser.add_argument(
        '--variant',
        choices=list(VARIANTS),
        default=Config.DEFAULT_VARIANT,
        help='Table layout: minimal (tested/name/author/category/tags) or '
             'extended (adds tester and tested_url) (default: %(default)s)'
    )
    parser.add_argument(
        '--tested-style',
        choices=list(TESTED_STYLES),
        default=Config.DEFAULT_TESTED_STYLE,
        help='Render tested as true/false (word) or ✅/❌ (glyph) (default: %(default)s)'
    )
    parser.add_argument(
        '--preview',
        action='store_true',
        help='Print the table to stdout instead of writing the report'
    )
    parser.add_argument(
        '--tablefmt',
        default=Config.PREVIEW_TABLEFMT,
        help='tabulate table format used by --preview, or json for full records (default: %(default)s)'
    )
    
    # === behaviour ===
    parser.add_argument(
        '--strict',
        action='store_true',
        help='Exit with status 1 when the report cannot be written'
    )
    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=list(LEVELS),
        default=Config.get_log_level().upper(),
        help='Logging level (default: %(default)s)'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    
    return parser


def _report_name(args: argparse.Namespace) -> str:
    if args.output_name:
        return args.output_name
    return get_schema(args.variant, args.tested_style).output_name


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)
    
    try:
        Logger.set_level(args.log_level)
        
        if args.preview:
            show_report(
                dir_path=args.dir_path,
                challenge_file=args.challenge_file,
                tested_file=args.tested_file,
                variant=args.variant,
                tested_style=args.tested_style,
                max_depth=args.max_depth,
                tablefmt=args.tablefmt
            )
        else:
            build_report(
                dir_path=args.dir_path,
                output_path=args.output_path,
                output_name=args.output_name,
                challenge_file=args.challenge_file,
                tested_file=args.tested_file,
                variant=args.variant,
                tested_style=args.tested_style,
                max_depth=args.max_depth
            )
    
    except KeyboardInterrupt:
        logger.info("\nInterrupted by user")
        sys.exit(130)
    except ValidationError as e:
        logger.error(f"Invalid options: {e}")
        if args.strict:
            sys.exit(1)
    except (ChalreportError, OSError) as e:
        # Reported, not propagated: exit status stays 0 unless --strict
        logger.error(f"Error writing to {_report_name(args)}: {e}")
        if args.strict:
            sys.exit(1)
    
    return 0


if __name__ == '__main__':
    sys.exit(main())
