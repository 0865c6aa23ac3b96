import argparse
import logging
import os
import sys
from pathlib import Path
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

# Ensure repo root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from laserdot.api.config import LaserDotConfig, SELECTION_POLICIES
from laserdot.app.loader import load_config
from laserdot.app.loop import run


def parse_size(text: str):
    w, h = map(int, text.lower().split("x"))
    return w, h


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Laser dot detector")
    parser.add_argument("--config", help="YAML config file (see configs/default.yaml)")
    parser.add_argument("--cam-index", type=int, help="OpenCV camera index")
    parser.add_argument("--screen", type=parse_size, help="Frame size WxH, e.g. 800x600")
    parser.add_argument("--threshold", type=int, help="Brightness cutoff 0-255 for the tracked channel")
    parser.add_argument("--selection", choices=SELECTION_POLICIES, help="Which blob counts as the dot")
    parser.add_argument("--preview", action="store_true", help="Also show OpenCV preview windows")
    parser.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING, ...")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = load_config(args.config) if args.config else LaserDotConfig()
    cfg = cfg.replace(
        cam_index=args.cam_index,
        frame_size=args.screen,
        threshold=args.threshold,
        selection=args.selection,
    )
    run(cfg, show_preview=args.preview)


if __name__ == "__main__":
    main()
