# ===============================
# path: jobs/export_openapi.py
# ===============================
"""Write the assembled OpenAPI document to disk.

Example:
    python -m jobs.export_openapi --out-dir docs/static --strict-yaml

Writes openapi.json (canonical) and openapi.yaml (flattened projection);
--strict-yaml also writes openapi.strict.yaml, a parseable YAML rendering.
Exits 1 without writing anything if the fragments fail to assemble.
"""
from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional

import config
from openapi_doc import AssemblyError, build_spec
from openapi_doc.render import to_flat_yaml, to_json, to_yaml

log = logging.getLogger("jobs.export_openapi")


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Assemble the OpenAPI document and write it out")
    p.add_argument("--out-dir", default=config.OPENAPI_OUTPUT_DIR)
    p.add_argument("--json-name", default="openapi.json")
    p.add_argument("--yaml-name", default="openapi.yaml")
    p.add_argument("--strict-yaml", action="store_true", help="Also write openapi.strict.yaml")
    p.add_argument("--no-leaderboard", action="store_true", help="Leave leaderboard paths out")
    p.add_argument("--log-level", default=config.LOG_LEVEL)
    return p.parse_args(argv)


def _write(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    log.info("wrote %s", path)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    config.configure_logging(args.log_level)

    try:
        spec = build_spec(
            config.default_meta(),
            include_leaderboard=config.OPENAPI_INCLUDE_LEADERBOARD and not args.no_leaderboard,
        )
    except AssemblyError as e:
        log.error("OpenAPI assembly failed: %s", e)
        return 1

    # render everything before touching the filesystem
    outputs = [(args.json_name, to_json(spec)), (args.yaml_name, to_flat_yaml(spec))]
    if args.strict_yaml:
        outputs.append(("openapi.strict.yaml", to_yaml(spec)))

    os.makedirs(args.out_dir, exist_ok=True)
    for name, text in outputs:
        _write(os.path.join(args.out_dir, name), text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
