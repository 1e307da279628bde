"""Command line entry point: template file in, Mermaid file out."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from cloudmaid.graph import AST
from cloudmaid.template import Template, TemplateError

_VERSION = "0.1.0"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(
        prog="cloudmaid",
        description="Draw a Mermaid flowchart of the resources in a CloudFormation template.",
    )
    parser.add_argument("-i", "--input-file", required=True)
    parser.add_argument("-o", "--output-file", required=True)
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Read a template, render its graph and write it to the output file."""
    args = parse_args(argv)
    try:
        contents = Path(args.input_file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error reading file: {exc}")
        return 0

    try:
        template = Template.from_json(contents)
    except TemplateError as exc:
        print(f"Error parsing template: {exc}", file=sys.stderr)
        return 1

    mermaid = AST.from_template(template).to_mermaid()
    output = args.output_file

    if os.path.exists(output):
        try:
            os.remove(output)
            print(f"Deleted existing {output}")
        except OSError as exc:
            print(f"Error deleting file: {exc}")

    try:
        Path(output).write_text(mermaid, encoding="utf-8")
        print(f"Mermaid written to {output}")
    except OSError as exc:
        print(f"Error writing to file: {exc}")
    return 0


if __name__ == "__main__":
    sys.exit(main())