"""Exemplar command-line interface.

Usage::

    exemplar materialize fhe-counter ./fhe-counter-example
    exemplar category basic ./basic-examples
    exemplar docs fhe-counter ./docs
    exemplar docs --all ./docs
    exemplar list

Run without arguments (or a subcommand without an id) to print the catalog
of valid ids.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.markup import escape
from rich.table import Table

from exemplar.config import Config
from exemplar.errors import ExemplarError, NotFoundError
from exemplar.registry import Registry, load_registry
from exemplar.reporter import DocGenerator
from exemplar.scaffolder import CategoryBundler, ProjectMaterializer
from exemplar.utils import console, print_error, print_success, print_warning


# ---------------------------------------------------------------------------
# Catalog output
# ---------------------------------------------------------------------------


def print_examples(registry: Registry) -> None:
    """Print every registered example as a table."""
    table = Table(title="Available examples", show_header=True, header_style="bold cyan")
    table.add_column("ID", no_wrap=True)
    table.add_column("Name")
    table.add_column("Category", style="dim")
    table.add_column("Complexity", style="dim")
    table.add_column("Description")
    for entry in registry.list_examples():
        table.add_row(
            *map(escape, (
                entry.id,
                entry.display_name,
                entry.category,
                entry.complexity.value,
                entry.description,
            ))
        )
    console.print(table)


def print_categories(registry: Registry) -> None:
    """Print every registered category as a table."""
    table = Table(title="Available categories", show_header=True, header_style="bold cyan")
    table.add_column("ID", no_wrap=True)
    table.add_column("Name")
    table.add_column("Examples", justify="right")
    table.add_column("Members", style="dim")
    table.add_column("Description")
    for category in registry.list_categories():
        members = registry.examples_in_category(category.id)
        table.add_row(
            *map(escape, (
                category.id,
                category.display_name,
                str(len(category.example_ids)),
                ", ".join(e.id for e in members) or "-",
                category.description,
            ))
        )
    console.print(table)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _cmd_materialize(args: argparse.Namespace, config: Config, registry: Registry) -> int:
    if not args.example_id:
        console.print(escape("Usage: exemplar materialize <example-id> [destination]"))
        print_examples(registry)
        return 0
    destination = Path(args.destination or f"./{args.example_id}-example")
    result = asyncio.run(
        ProjectMaterializer(config, registry).materialize(args.example_id, destination)
    )
    _print_next_steps(result.destination)
    return 0


def _cmd_category(args: argparse.Namespace, config: Config, registry: Registry) -> int:
    if not args.category_id:
        console.print(escape("Usage: exemplar category <category-id> [destination]"))
        print_categories(registry)
        return 0
    destination = Path(args.destination or f"./{args.category_id}-examples")
    result = asyncio.run(
        CategoryBundler(config, registry).materialize_category(args.category_id, destination)
    )
    if not result.bundled_examples:
        print_warning("No examples were bundled; the category tree has no components.")
    _print_next_steps(result.destination)
    return 0


def _cmd_docs(args: argparse.Namespace, config: Config, registry: Registry) -> int:
    targets = list(args.targets)
    generator = DocGenerator(config, registry)

    if args.all:
        output_root = Path(targets[0]) if targets else config.docs_path
        written = asyncio.run(generator.generate_all_docs(output_root))
        print_success(f"{len(written)} documentation pages generated in {output_root}")
        return 0

    if not targets:
        console.print(escape("Usage: exemplar docs <example-id|--all> [output-root]"))
        print_examples(registry)
        return 0
    example_id = targets[0]
    output_root = Path(targets[1]) if len(targets) > 1 else config.docs_path
    asyncio.run(generator.generate_docs(example_id, output_root))
    return 0


def _cmd_list(args: argparse.Namespace, config: Config, registry: Registry) -> int:
    print_examples(registry)
    print_categories(registry)
    return 0


def _print_next_steps(root: Path) -> None:
    console.print("\nNext steps:")
    console.print(f"  cd {escape(str(root))}")
    console.print("  npm install")
    console.print("  npm run compile")
    console.print("  npm run test")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exemplar",
        description="Exemplar -- materialize example projects and generate their docs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  exemplar materialize fhe-counter ./fhe-counter-example\n"
            "  exemplar category basic ./basic-examples\n"
            "  exemplar docs --all ./docs\n"
        ),
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Repository root holding the base template and payloads "
             "(default: $EXEMPLAR_ROOT or .)",
    )
    parser.add_argument(
        "--registry",
        default=None,
        help="YAML/JSON catalog file (default: built-in catalog)",
    )
    sub = parser.add_subparsers(dest="command")

    p_mat = sub.add_parser("materialize", help="Generate a project for one example")
    p_mat.add_argument("example_id", nargs="?", help="Example id")
    p_mat.add_argument("destination", nargs="?", help="Output directory (default: ./<id>-example)")
    p_mat.set_defaults(handler=_cmd_materialize)

    p_cat = sub.add_parser("category", help="Bundle every example of a category")
    p_cat.add_argument("category_id", nargs="?", help="Category id")
    p_cat.add_argument("destination", nargs="?", help="Output directory (default: ./<id>-examples)")
    p_cat.set_defaults(handler=_cmd_category)

    p_docs = sub.add_parser("docs", help="Generate documentation pages")
    p_docs.add_argument("--all", action="store_true", help="Document every example")
    p_docs.add_argument(
        "targets",
        nargs="*",
        help="<example-id> [output-root], or [output-root] with --all (default: ./docs)",
    )
    p_docs.set_defaults(handler=_cmd_docs)

    p_list = sub.add_parser("list", help="List registered examples and categories")
    p_list.set_defaults(handler=_cmd_list)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point for ``exemplar`` / ``python -m exemplar.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = Config.from_env()
    if args.root:
        config.root_dir = Path(args.root)
    if args.registry:
        config.registry_file = Path(args.registry)

    try:
        registry = load_registry(config.registry_file)
    except ExemplarError as exc:
        print_error(f"Error: {exc}")
        return 1

    if args.command is None:
        console.print("Usage: exemplar <materialize|category|docs|list> ...")
        return _cmd_list(args, config, registry)

    try:
        return args.handler(args, config, registry)
    except NotFoundError as exc:
        print_error(f"Error: {exc.kind.capitalize()} not found: {exc.key}")
        if exc.available:
            console.print(escape(f"Available {exc.kind} ids: {', '.join(exc.available)}"))
        return 1
    except (ExemplarError, OSError) as exc:
        print_error(f"Error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
