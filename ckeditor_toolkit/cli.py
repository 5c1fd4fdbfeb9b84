"""
CKEditor Toolkit - command line entry point

Sub-commands:

* ``resolve``  print the load order for a set of plugins
* ``tree``     print the dependency tree of one plugin
* ``filter``   run the conflict filter over plugin names
* ``render``   turn a YAML or JSON build file into the editor document
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import yaml

from ckeditor_toolkit.core.models.exceptions import EditorConfigError
from ckeditor_toolkit.core.plugins import (
    DependencyMode,
    DependencyResolver,
    FilterOptions,
    PluginError,
    dependency_tree,
    filter_conflicting_plugins,
)
from ckeditor_toolkit.core.services.configuration_service import (
    EditorConfigurationBuilder,
    to_plugin,
)
from ckeditor_toolkit.core.utils import to_json
from ckeditor_toolkit.logging_config import setup_logging
from ckeditor_toolkit.version import get_app_version

logger = logging.getLogger(__name__)

APP_NAME = "CKEditor Toolkit"

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ckeditor-toolkit",
        description=f"{APP_NAME} - editor plugin resolution and configuration"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (verbose output)"
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version and exit"
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    resolve_cmd = commands.add_parser("resolve", help="Print plugins in load order")
    resolve_cmd.add_argument("plugins", nargs="+", help="Plugin names, e.g. ImageCaption")
    resolve_cmd.add_argument(
        "--mode",
        choices=[mode.value for mode in DependencyMode],
        default=DependencyMode.AUTO_RESOLVE.value,
        help="Dependency mode (default: auto_resolve)"
    )
    resolve_cmd.add_argument("--json", action="store_true", help="Print a JSON list")

    tree_cmd = commands.add_parser("tree", help="Print the dependency tree of a plugin")
    tree_cmd.add_argument("plugin", help="Plugin name")

    filter_cmd = commands.add_parser("filter", help="Drop conflicting plugin names")
    filter_cmd.add_argument("names", nargs="+", help="Plugin names in requested order")
    filter_cmd.add_argument(
        "--strict",
        action="store_true",
        help="Keep unavailable and config-required plugins"
    )
    filter_cmd.add_argument(
        "--allow-config-required",
        action="store_true",
        help="Keep plugins that need extra configuration"
    )

    render_cmd = commands.add_parser("render", help="Render a build file to the editor document")
    render_cmd.add_argument("build_file", help="YAML or JSON build description")
    render_cmd.add_argument("-o", "--output", help="Write the document here instead of stdout")
    render_cmd.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    return parser


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def _cmd_resolve(args: argparse.Namespace) -> int:
    resolver = DependencyResolver()
    requested = [to_plugin(name) for name in args.plugins]
    mode = DependencyMode(args.mode)
    ordered = resolver.topological_sort(resolver.resolve_for_mode(requested, mode))
    names = [plugin.js_name for plugin in ordered]
    if args.json:
        print(json.dumps(names))
    else:
        print("\n".join(names))
    return EXIT_OK


def _cmd_tree(args: argparse.Namespace) -> int:
    sys.stdout.write(dependency_tree(to_plugin(args.plugin)))
    return EXIT_OK


def _cmd_filter(args: argparse.Namespace) -> int:
    options = FilterOptions(
        strict_plugin_loading=args.strict,
        allow_config_required_plugins=args.allow_config_required,
    )
    result = filter_conflicting_plugins(args.names, options)
    print("\n".join(result.filtered))
    for name in result.removed:
        print(f"removed: {name}", file=sys.stderr)
    return EXIT_OK


def _load_build_file(path: Path) -> dict:
    # YAML is a superset of JSON, one parser covers both formats
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise EditorConfigError(f"Build file must contain a mapping: {path}")
    return data


def _cmd_render(args: argparse.Namespace) -> int:
    build_file = Path(args.build_file)
    logger.info("Rendering build file: %s", build_file)
    configuration = EditorConfigurationBuilder.from_mapping(_load_build_file(build_file)).build()
    text = to_json(configuration.to_document(), indent=args.indent)
    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
        logger.info("Wrote editor document: %s", args.output)
    else:
        print(text)
    for name in configuration.removed_plugins:
        print(f"removed: {name}", file=sys.stderr)
    return EXIT_OK


_COMMANDS = {
    "resolve": _cmd_resolve,
    "tree": _cmd_tree,
    "filter": _cmd_filter,
    "render": _cmd_render,
}


def main(argv: Optional[List[str]] = None) -> int:
    """
    Primary command line entry point. Returns the process exit code.
    """
    args = parse_arguments(argv)

    if args.version:
        print(f"{APP_NAME} {get_app_version()}")
        return EXIT_OK

    if not args.command:
        build_parser().print_help()
        return EXIT_FAILURE

    setup_logging(logging.DEBUG if args.debug else None)
    logger.debug("Running command: %s", args.command)

    try:
        return _COMMANDS[args.command](args)
    except (PluginError, EditorConfigError, OSError, ValueError, TypeError, yaml.YAMLError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
