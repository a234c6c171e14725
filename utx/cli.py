"""
UTX package inspector.

Usage:
    python -m utx info Textures.utx
    python -m utx names Textures.utx --json
    python -m utx exports Textures.utx
    python -m utx imports Textures.utx
    python -m utx textures Textures.utx
"""

import argparse
import json
import sys

from .errors import PackageError
from .package import Package, load_utx, open_package
from .target import ImageTarget


def cmd_info(pkg: Package, args) -> int:
    print(f"Package: {args.file}")
    pkg.dump_info()
    return 0


def cmd_names(pkg: Package, args) -> int:
    rows = [
        {"index": i, "name": entry.text, "flags": entry.flags}
        for i, entry in enumerate(pkg.names)
    ]
    if args.json:
        print(json.dumps(rows, indent=2))
        return 0
    for row in rows:
        print(f"{row['index']:5d}  {row['flags']:#010x}  {row['name']}")
    return 0


def cmd_exports(pkg: Package, args) -> int:
    rows = []
    for i, export in enumerate(pkg.exports):
        rows.append({
            "index": i,
            "object_name": pkg.export_name(i),
            "class_name": pkg.class_name(export),
            "super": export.super_ref.to_raw(),
            "group": export.group,
            "object_flags": export.object_flags,
            "serial_size": export.serial_size,
            "serial_offset": export.serial_offset,
        })
    if args.json:
        print(json.dumps(rows, indent=2))
        return 0
    for row in rows:
        print(
            f"{row['index']:5d}  {row['class_name']:<20} {row['object_name']:<32} "
            f"size={row['serial_size']} offset={row['serial_offset']}"
        )
    return 0


def cmd_imports(pkg: Package, args) -> int:
    rows = []
    for i, imp in enumerate(pkg.imports):
        rows.append({
            "index": i,
            "object_name": pkg.import_name(i),
            "class_package": pkg.names.lookup(imp.class_package).text,
            "class_name": pkg.names.lookup(imp.class_name).text,
            "package": pkg.object_name(imp.package),
        })
    if args.json:
        print(json.dumps(rows, indent=2))
        return 0
    for row in rows:
        print(
            f"{row['index']:5d}  {row['class_package']}.{row['class_name']:<20} "
            f"{row['object_name']:<32} in {row['package'] or '-'}"
        )
    return 0


def cmd_textures(args) -> int:
    """Load the package into an image target; parses the file on its own."""
    target = ImageTarget()
    result = load_utx(args.file, target)
    target.attach_metadata({"utx_textures": result.texture_names})

    if args.json:
        print(json.dumps({
            "texture_exports": result.texture_exports,
            "texture_names": result.texture_names,
            "image_mode": target.image.mode,
        }, indent=2))
        return 0

    print(f"Found {len(result.texture_exports)} texture exports")
    for index, name in zip(result.texture_exports, result.texture_names):
        print(f"  [{index}] {name}")
    return 0


COMMANDS = {
    "info": cmd_info,
    "names": cmd_names,
    "exports": cmd_exports,
    "imports": cmd_imports,
}


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Inspect Unreal texture packages (.utx)")
    parser.add_argument("command", choices=sorted([*COMMANDS, "textures"]), help="What to show")
    parser.add_argument("file", help="Package file")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    args = parser.parse_args(argv)

    try:
        if args.command == "textures":
            return cmd_textures(args)
        pkg = open_package(args.file)
        return COMMANDS[args.command](pkg, args)
    except PackageError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
