# -*- coding: utf-8 -*-
"""
Консольный просмотрщик:

    python -m wavemesh model.obj [--normalize] [--radius 2] [--no-center]
                                 [--rebuild-normals] [--config cfg.json] [--verbose]

Импортирует модель и печатает JSON‑сводку. Код выхода 1 – импорт не удался.
"""

import argparse
import json
import sys

from wavemesh.scene.model import load_model
from wavemesh.scene.model_io import model_to_dict
from wavemesh.utils.config import Config
from wavemesh.utils.logger import logger, set_log_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wavemesh",
        description="Import a Wavefront OBJ model and print a JSON summary.",
    )
    parser.add_argument("filename", help="path to the .obj file")
    parser.add_argument("--config", default=None, help="JSON config file")
    parser.add_argument("--normalize", action="store_true",
                        help="rescale the model to --radius")
    parser.add_argument("--radius", type=float, default=None,
                        help="target radius for --normalize")
    parser.add_argument("--no-center", action="store_true",
                        help="do not move the bounds center to the origin")
    parser.add_argument("--rebuild-normals", action="store_true",
                        help="recompute normals even if the file has them")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    Config.reset()
    cfg = Config(args.config)
    set_log_level("DEBUG" if args.verbose else cfg["log_level"])

    model = load_model(args.filename, cfg, rebuild_normals=args.rebuild_normals)
    if model is None:
        logger.error(f"[CLI] Failed to import {args.filename}")
        return 1

    if args.normalize:
        radius = args.radius if args.radius is not None else float(cfg["normalize"].get("radius", 1.0))
        model.normalize(radius, not args.no_center)

    json.dump(model_to_dict(model), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
