"""CLI entrypoints for docsite commands."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import List

from .config import ConfigError, SiteConfig, load_config
from .logging import configure_logging
from .models import Container, Element, Leaf
from .rendering import ParameterArityMismatchError, format_signature
from .sitegen import FileSystemError, SiteBuilder
from .templating import PlaceholderError, TemplateNotFoundError
from .treefile import TreeFormatError, load_tree


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docsite",
        description="Render a documented symbol tree into a static HTML site.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Generate the HTML site for a symbol tree file.",
    )
    _add_verbose_option(build_parser, suppress_default=True)
    build_parser.add_argument("tree", help="YAML or JSON symbol tree file.")
    build_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output root directory (overrides output_dir from the config).",
    )
    build_parser.add_argument(
        "--templates-dir",
        default=None,
        help="Directory of template overrides; missing files fall back to the defaults.",
    )
    build_parser.add_argument(
        "--config",
        default=".",
        help="Path to .docsite.yml or the directory holding it (defaults to current directory).",
    )
    build_parser.add_argument(
        "--skip-invalid-members",
        action="store_true",
        default=None,
        help="Log and skip members whose parameter lists are inconsistent instead of failing.",
    )
    build_parser.add_argument(
        "--no-link-check",
        action="store_true",
        help="Do not validate links after the build.",
    )
    build_parser.add_argument(
        "--log-file",
        default=None,
        help="Also write the build log to this file.",
    )

    show_parser = subparsers.add_parser(
        "show",
        help="Print the outline of a symbol tree file.",
    )
    _add_verbose_option(show_parser, suppress_default=True)
    show_parser.add_argument("tree", help="YAML or JSON symbol tree file.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docsite commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = getattr(args, "log_file", None)
    configure_logging(
        verbose=bool(args.verbose),
        log_file=Path(log_file).expanduser() if log_file else None,
    )

    try:
        root = load_tree(Path(args.tree))
    except TreeFormatError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "show":
        print(describe_tree(root), end="")
        return

    try:
        config = _apply_overrides(load_config(Path(args.config)), args)
        result = SiteBuilder.from_config(config).build(root)
    except (ConfigError, TemplateNotFoundError, PlaceholderError, ParameterArityMismatchError) as exc:
        parser.exit(1, f"docsite build failed: {exc}\n")
    except FileSystemError as exc:
        parser.exit(1, f"docsite build failed: {exc}\nPartial output may remain on disk.\n")
    except ValueError as exc:
        parser.exit(1, f"docsite build failed: {exc}\n")

    print(f"Site written to {_relativize(result.output_root)} ({len(result.pages)} page(s))")
    if result.link_issues:
        count = sum(len(issues) for issues in result.link_issues.values())
        print(f"{count} broken link(s) detected; run with --verbose for details")


def _apply_overrides(config: SiteConfig, args: argparse.Namespace) -> SiteConfig:
    changes: dict[str, object] = {}
    if args.output:
        changes["output_dir"] = Path(args.output).expanduser().resolve()
    if args.templates_dir:
        changes["templates_dir"] = Path(args.templates_dir).expanduser().resolve()
    if args.skip_invalid_members:
        changes["skip_invalid_members"] = True
    if args.no_link_check:
        changes["validate_links"] = False
    return replace(config, **changes) if changes else config


def describe_tree(root: Container) -> str:
    """Return an indented outline of elements and their members."""
    lines: List[str] = []
    for child in root.children:
        _describe(child, "", lines)
    return "".join(f"{line}\n" for line in lines)


def _describe(element: Element, indent: str, lines: List[str]) -> None:
    lines.append(f"{indent}> {element.name} ({element.kind})")
    if isinstance(element, Container):
        for child in element.children:
            _describe(child, indent + "  ", lines)
    elif isinstance(element, Leaf):
        for member in element.members:
            signature = ""
            if member.is_callable:
                try:
                    signature = format_signature(member).unescape()
                except ParameterArityMismatchError:
                    signature = "(?)"
            lines.append(f"{indent}  - {member.kind}: {member.name}{signature}")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
