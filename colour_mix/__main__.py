"""colour-mix — tint, shade and shift colours in generated CSS declarations.

Usage: uv run colour-mix <command> [options]

Variants are auto-discovered from colour_mix/variants/.
Each variant module's docstring is its documentation.
Run `colour-mix help <variant>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colour-mix looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.

  COLOUR_MIX_SEPARATORS  accepted token separators, comma-separated (default ":,-")
"""

import argparse
import importlib
import sys

from colour_mix import registry
from colour_mix.core.colour import parse_css_color
from colour_mix.core.env import config_from_env, load_env
from colour_mix.core.preview import resolve_rgb, rgb_distance, to_hex
from colour_mix.core.report import format_json, format_text
from colour_mix.core.types import PropertyEntry, RewriteReport, VariantContext


def _load_variant_module(name: str) -> object:
    """Load the raw module for a variant (for docstring access)."""
    return importlib.import_module(f'colour_mix.variants.{name}')


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  colour-mix match mix-shade-30-bg-red\n'
        "  colour-mix apply mix-tint-20: 'color:#336699' 'background:red-500'\n"
        "  colour-mix apply mix-shift--40- 'border-color:rgb(10 20 30 / .5)' --json\n"
        "  colour-mix --separators ':,_' match mix-shade-30_text\n"
        '  colour-mix help mix\n'
    )
    parser = argparse.ArgumentParser(
        prog='colour-mix',
        description='Tint, shade and shift colours in generated CSS declarations.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument(
        '-s',
        '--separators',
        metavar='SEPS',
        default=None,
        help='Comma-separated token separators (overrides COLOUR_MIX_SEPARATORS)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    match_parser = sub.add_parser('match', help='Show how a token is matched')
    match_parser.add_argument('token', help='Utility class token, e.g. mix-shade-30-')

    apply_parser = sub.add_parser('apply', help='Rewrite declarations for a token')
    apply_parser.add_argument('token', help='Utility class token, e.g. mix-shade-30-')
    apply_parser.add_argument('declarations', nargs='*', metavar='PROP:VALUE', help='Generated declarations')
    apply_parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    apply_parser.add_argument('-v', '--verbose', action='store_true', help='Report unchanged declarations on stderr')

    help_parser = sub.add_parser('help', help='Print full docs for a variant')
    help_parser.add_argument('variant', nargs='?', help='Variant name')

    return parser


def _parse_declarations(items: list[str]) -> list[PropertyEntry]:
    """'color:#fff' -> ('color', '#fff'). An empty value means no value."""
    entries = []
    for item in items:
        prop, sep, value = item.partition(':')
        if not sep or not prop.strip():
            raise ValueError(f'Declaration must look like PROP:VALUE, got {item!r}')
        value = value.strip()
        entries.append((prop.strip(), value or None))
    return entries


def _preview(before: str, after: str) -> str | None:
    """Hex preview of a mixed colour, with its distance from the original."""
    mixed = parse_css_color(after)
    rgba = resolve_rgb(mixed) if mixed else None
    if rgba is None:
        return None
    text = to_hex(rgba)
    if rgba[3] < 1:
        text += f' alpha={rgba[3]}'
    original = parse_css_color(before)
    original_rgba = resolve_rgb(original) if original else None
    if original_rgba is not None:
        text += f'  Δ={rgb_distance(original_rgba, rgba):.1f} from {to_hex(original_rgba)}'
    return text


def _print_help(name: str | None) -> None:
    """Print full module docstring for a variant."""
    variants = registry.all_variants()

    if name is None:
        print('Available variants:\n')
        for vname, rule in sorted(variants.items()):
            print(f'  {vname:<10} {rule.help}')
        print('\nRun: colour-mix help <variant> for full docs.')
        return

    rule = registry.get(name)
    doc = (_load_variant_module(rule.name).__doc__ or '').strip()
    print(doc or f'(No module docs for {name!r})')


def _run_match(token: str, ctx: VariantContext) -> int:
    found = registry.match_first(token, ctx)
    if found is None:
        print(f'{token}: no variant matched')
        return 1
    rule, result = found
    print(f'{token}: {rule.name}')
    print(f'  mode:      {result.operation.mode}')
    print(f'  weight:    {result.operation.weight}')
    print(f'  consumed:  {result.consumed} ({token[: result.consumed]!r})')
    print(f'  remaining: {result.matcher!r}')
    return 0


def _run_apply(args: argparse.Namespace, ctx: VariantContext) -> int:
    entries = _parse_declarations(args.declarations)
    report = RewriteReport(token=args.token)

    found = registry.match_first(args.token, ctx)
    if found is None:
        print(format_json(report) if args.json else format_text(report))
        return 1

    rule, result = found
    report.variant = rule.name
    report.mode = result.operation.mode
    report.weight = result.operation.weight
    report.remainder = result.matcher

    for (prop, before), (_prop, after) in zip(entries, result.rewrite(entries)):
        preview = _preview(before, after) if before != after else None
        report.add(prop, before, after, preview)
        if before == after and args.verbose:
            print(f'colour-mix: unchanged {prop}: {before} (not an rgb colour)', file=sys.stderr)

    print(format_json(report) if args.json else format_text(report))
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'colour-mix: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == 'help':
            _print_help(args.variant)
            return

        ctx = VariantContext(config=config_from_env(args.separators))
        if args.command == 'match':
            code = _run_match(args.token, ctx)
        else:
            code = _run_apply(args, ctx)
    except (KeyError, ValueError) as exc:
        message = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
        print(f'Error: {message}', file=sys.stderr)
        sys.exit(1)

    if code:
        sys.exit(code)


if __name__ == '__main__':
    main()
