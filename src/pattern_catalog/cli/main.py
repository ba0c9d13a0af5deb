"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Output formatting and exit codes
"""
import argparse
import os
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

from pattern_catalog import __version__
from pattern_catalog.bootstrap import Application, create_application
from pattern_catalog.cli.formatters import format_output
from pattern_catalog.domain.exceptions import DocumentError, DomainException
from pattern_catalog.domain.models import PatternCategory
from pattern_catalog.infrastructure.logging.logger import get_logger

FORMATS = ['json', 'yaml', 'table', 'list']
CATEGORIES = [category.value for category in PatternCategory]

# A command returns its payload and exit code; str payloads are printed verbatim
CommandResult = Tuple[Any, int]


def add_output_options(parser: argparse.ArgumentParser) -> None:
    """Add --format and --output to an action parser without overriding the global values."""
    parser.add_argument('--format', choices=FORMATS, default=argparse.SUPPRESS, help='Output format')
    parser.add_argument('--output', default=argparse.SUPPRESS, help='Output file (default: stdout)')


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the resource-action structure."""

    # Main parser with global options
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "pattern-catalog",
        description="Design Pattern Catalog - runnable examples of the classic design patterns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s patterns list --format table        # List all patterns
  %(prog)s patterns show observer              # Show metadata and source
  %(prog)s patterns run "factory method"       # Run one example
  %(prog)s patterns verify                     # Check every example's output
  %(prog)s docs render --output PATTERNS.md    # Write the Markdown document
  %(prog)s docs lint PATTERNS.md               # Check a document's snippets
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured logging level')
    parser.add_argument('--format', choices=FORMATS, default='json', help='Output format')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', action='store_true', help='Show tracebacks on errors')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    # Resource subparsers
    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    # Patterns resource
    patterns_parser = subparsers.add_parser('patterns', help='Browse and run pattern examples')
    patterns_subparsers = patterns_parser.add_subparsers(dest='action', help='Pattern actions')

    patterns_list = patterns_subparsers.add_parser('list', help='List patterns')
    patterns_list.add_argument('--category', choices=CATEGORIES, help='Filter by category')

    patterns_show = patterns_subparsers.add_parser('show', help='Show pattern details and source')
    patterns_show.add_argument('name', help='Pattern slug, name or alias')

    patterns_run = patterns_subparsers.add_parser('run', help='Run a pattern example')
    patterns_run.add_argument('name', help='Pattern slug, name or alias')

    patterns_verify = patterns_subparsers.add_parser('verify', help='Verify example output')
    patterns_verify.add_argument('names', nargs='*', help='Patterns to verify (default: all)')

    # Docs resource
    docs_parser = subparsers.add_parser('docs', help='Render and lint the Markdown document')
    docs_subparsers = docs_parser.add_subparsers(dest='action', help='Document actions')

    docs_render = docs_subparsers.add_parser('render', help='Render the catalog document')
    docs_render.add_argument('--categories', nargs='+', choices=CATEGORIES,
                             help='Only render these categories')

    docs_lint = docs_subparsers.add_parser('lint', help='Check the snippets of a document')
    docs_lint.add_argument('file', help='Markdown file to lint')

    # Config resource
    config_parser = subparsers.add_parser('config', help='Configuration management')
    config_subparsers = config_parser.add_subparsers(dest='action', help='Config actions')
    config_show = config_subparsers.add_parser('show', help='Show effective configuration')

    # Output options are also accepted after the action
    for action_parser in (patterns_list, patterns_show, patterns_run, patterns_verify,
                          docs_render, docs_lint, config_show):
        add_output_options(action_parser)

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def handle_patterns_list(args: argparse.Namespace, app: Application) -> CommandResult:
    category = PatternCategory(args.category) if args.category else None
    patterns = [example.to_summary_dict() for example in app.list_patterns(category)]
    return {"patterns": patterns}, 0


def handle_patterns_show(args: argparse.Namespace, app: Application) -> CommandResult:
    example = app.registry.get(args.name)
    details = example.model_dump(mode="json")
    details["source"] = app.runner.get_source(example)
    return details, 0


def handle_patterns_run(args: argparse.Namespace, app: Application) -> CommandResult:
    example = app.registry.get(args.name)
    result = app.runner.run(example)
    output = "\n".join(result.output_lines)
    if result.error:
        output = f"{output}\n{result.error}" if output else result.error
        return output, 1
    return output, 0


def handle_patterns_verify(args: argparse.Namespace, app: Application) -> CommandResult:
    report = app.verification_service().verify(args.names or None)
    return report.to_dict(), 0 if report.success else 1


def handle_docs_render(args: argparse.Namespace, app: Application) -> CommandResult:
    categories = [PatternCategory(value) for value in args.categories] if args.categories else None
    return app.document_service().render(categories), 0


def handle_docs_lint(args: argparse.Namespace, app: Application) -> CommandResult:
    report = app.lint_service().lint_file(args.file)
    return report.to_dict(), 0 if report.success else 1


def handle_config_show(args: argparse.Namespace, app: Application) -> CommandResult:
    return app.config_manager.to_dict(), 0


# Command handler mapping
COMMAND_HANDLERS: Dict[Tuple[str, str], Callable[[argparse.Namespace, Application], CommandResult]] = {
    ('patterns', 'list'): handle_patterns_list,
    ('patterns', 'show'): handle_patterns_show,
    ('patterns', 'run'): handle_patterns_run,
    ('patterns', 'verify'): handle_patterns_verify,
    ('docs', 'render'): handle_docs_render,
    ('docs', 'lint'): handle_docs_lint,
    ('config', 'show'): handle_config_show,
}


def execute_command(args: argparse.Namespace, app: Application) -> CommandResult:
    """Execute the appropriate command handler."""
    handler_key = (args.resource, args.action)
    if handler_key not in COMMAND_HANDLERS:
        raise ValueError(f"Unknown command: {args.resource} {args.action}")
    return COMMAND_HANDLERS[handler_key](args, app)


def write_result(payload: Any, args: argparse.Namespace) -> None:
    """
    Format the payload and send it to stdout or the --output file.

    Raises:
        DocumentError: If the output file cannot be written
    """
    if isinstance(payload, str):
        text = payload
    else:
        text = format_output(payload, args.format)
    if not text.endswith("\n"):
        text += "\n"

    if args.output:
        try:
            output_dir = os.path.dirname(args.output)
            if output_dir:
                os.makedirs(output_dir, exist_ok=True)
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(text)
        except OSError as e:
            raise DocumentError(args.output, str(e)) from e
        if not args.quiet:
            print(f"Output written to {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(text)


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)

        # Validate required arguments
        if not args.resource:
            print("Error: No resource specified. Use --help for usage information.", file=sys.stderr)
            sys.exit(2)

        if not args.action:
            print(f"Error: No action specified for {args.resource}. Use --help for usage information.",
                  file=sys.stderr)
            sys.exit(2)

        logger = get_logger(__name__)

        try:
            app = create_application(args.config, log_level=args.log_level)
            payload, exit_code = execute_command(args, app)
            write_result(payload, args)
        except DomainException as e:
            logger.error("Domain error", error=str(e))
            if not args.quiet:
                print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except Exception as e:
            logger.error("Unexpected error", error=str(e))
            if args.verbose:
                import traceback
                traceback.print_exc()
            if not args.quiet:
                print(f"Unexpected error: {e}", file=sys.stderr)
            sys.exit(1)

        if exit_code:
            sys.exit(exit_code)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
