"""CLI entrypoints for rendering avatars and inspecting their parameters."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict, replace
from pathlib import Path

from monogram_core import AvatarConfig, AvatarError, BorderConfig, config_to_dict, load_config
from monogram_core.logging_setup import configure_logging
from monogram_renderer import AvatarFactory, list_shapes


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _config_from_args(args: argparse.Namespace) -> AvatarConfig:
    cfg = load_config(Path(args.config).expanduser() if args.config else None)
    overrides: dict[str, object] = {}
    if args.shape:
        overrides["shape"] = args.shape
    if args.chars is not None:
        overrides["chars"] = args.chars
    if args.size is not None:
        overrides["width"] = args.size
        overrides["height"] = args.size
    if args.font_size is not None:
        overrides["font_size"] = args.font_size
    if args.ascii:
        overrides["ascii"] = True
    if args.border_size is not None or args.border_color:
        overrides["border"] = BorderConfig(
            size=cfg.border.size if args.border_size is None else args.border_size,
            color=args.border_color or cfg.border.color,
        )
    return replace(cfg, **overrides) if overrides else cfg


def _factory(args: argparse.Namespace) -> AvatarFactory:
    return AvatarFactory(_config_from_args(args))


def cmd_initials(args: argparse.Namespace) -> int:
    factory = _factory(args)
    print(factory.get_initials(args.name))
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    avatar = _factory(args).create(args.name)
    path = avatar.save(Path(args.out).expanduser(), quality=args.quality)
    _print_json({"path": str(path), "cache_key": avatar.cache_key})
    return 0


def cmd_data_url(args: argparse.Namespace) -> int:
    print(_factory(args).create(args.name).to_data_url())
    return 0


def cmd_key(args: argparse.Namespace) -> int:
    avatar = _factory(args).create(args.name)
    resolved = avatar.resolve()
    _print_json({"cache_key": avatar.cache_key, "resolved": asdict(resolved)})
    return 0


def cmd_shapes(_args: argparse.Namespace) -> int:
    _print_json(list_shapes())
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    _print_json(config_to_dict(_config_from_args(args)))
    return 0


def _common_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", default=None, help="Path to JSON config file")
    common.add_argument("--shape", default=None, help="Shape name, e.g. circle or square")
    common.add_argument("--chars", type=int, default=None, help="Maximum number of initials")
    common.add_argument("--size", type=int, default=None, help="Width and height in pixels")
    common.add_argument("--font-size", type=int, default=None)
    common.add_argument("--border-size", type=int, default=None)
    common.add_argument("--border-color", default=None, help="Color, or 'foreground' / 'background'")
    common.add_argument("--ascii", action="store_true", help="Transliterate the name to ASCII first")
    return common


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="monogram", description="Deterministic initials avatars")
    sub = parser.add_subparsers(dest="command", required=True)
    common = _common_options()

    initials_cmd = sub.add_parser("initials", parents=[common], help="Print the initials for a name")
    initials_cmd.add_argument("name")
    initials_cmd.set_defaults(func=cmd_initials)

    render_cmd = sub.add_parser("render", parents=[common], help="Render an avatar PNG to a file")
    render_cmd.add_argument("name")
    render_cmd.add_argument("--out", required=True, help="Output PNG path")
    render_cmd.add_argument("--quality", type=int, default=90)
    render_cmd.set_defaults(func=cmd_render)

    url_cmd = sub.add_parser("data-url", parents=[common], help="Print the avatar as a base64 data URL")
    url_cmd.add_argument("name")
    url_cmd.set_defaults(func=cmd_data_url)

    key_cmd = sub.add_parser("key", parents=[common], help="Print resolved parameters and cache key")
    key_cmd.add_argument("name")
    key_cmd.set_defaults(func=cmd_key)

    shapes_cmd = sub.add_parser("shapes", help="List registered shapes")
    shapes_cmd.set_defaults(func=cmd_shapes)

    config_cmd = sub.add_parser("config", parents=[common], help="Print the effective configuration")
    config_cmd.set_defaults(func=cmd_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging(console=False)
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except AvatarError as exc:
        print(f"monogram: error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
