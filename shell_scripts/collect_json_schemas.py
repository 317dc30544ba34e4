#!/usr/bin/env python3

import json
from pathlib import Path

from pydantic.json_schema import model_json_schema
from password_zen._conf import Settings
from password_zen.dto import AnalysisCriteria, GenerationDefaults


def execute(output_dir: str):
    for filename, builder in {
        Path(output_dir) / "configuration.json": Settings,
        Path(output_dir) / "analysis_criteria.json": AnalysisCriteria,
        Path(output_dir) / "generation_defaults.json": GenerationDefaults,
    }.items():
        filename.write_text(json.dumps(model_json_schema(builder), indent=2))
        print("generated", filename)


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser(
        prog="collect_json_schemas",
        description=(
            "Collects JSON schemas of the configuration file to a given folder, for "
            "editor validation and completion."
        ),
    )
    parser.add_argument("output_dir")
    args = parser.parse_args()

    execute(output_dir=args.output_dir)
