#!/usr/bin/env python3
"""Reduce an image to K colors with k-means and save the result."""

import argparse
import logging
import sys
from pathlib import Path

from .config import RunConfig
from .errors import QuantizerError
from .image import load
from .kmeans import DEFAULT_MAX_ITER, EMPTY_POLICIES

def run(config: RunConfig) -> Path:
    """Load, cluster and export one image as described by `config`."""
    img = load(config.input_path)
    print(f"Processing: {config.input_path} ({config.k} colors)")

    palette = img.cluster(config.k, max_iter=config.max_iter, empty_policy=config.empty_policy)
    print(f"  Palette: {[tuple(int(v) for v in p.as_tuple()) for p in palette]}")
    if not img.result.converged:
        print(f"  Stopped after {img.result.iterations} iterations without converging")

    print(f"  Output Name: {config.output_path}")
    print(f"  Size W*H: {img.width} {img.height}")
    out_path = img.export_reduced(config.output_path)
    print(f"  Saved: {out_path}")
    return out_path

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ppm-quantize", description=__doc__)
    p.add_argument("basename", help="input file name without extension")
    p.add_argument("k", nargs="?", type=int, default=2, help="number of colors to keep (default: 2)")
    p.add_argument("-d", "--directory", default=".", help="directory holding the input image")
    p.add_argument("-o", "--output-dir", default=".", help="directory for the reduced image")
    p.add_argument("--ext", default="ppm", help="file extension of input and output (default: ppm)")
    p.add_argument("--max-iter", type=int, default=DEFAULT_MAX_ITER,
                   help=f"iteration cap for k-means (default: {DEFAULT_MAX_ITER})")
    p.add_argument("--empty-policy", choices=EMPTY_POLICIES, default="reseed",
                   help="what to do with a cluster that loses all its pixels")
    p.add_argument("-v", "--verbose", action="store_true", help="log each iteration")
    return p

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        config = RunConfig(
            basename=args.basename,
            k=args.k,
            directory=args.directory,
            extension=args.ext,
            output_dir=args.output_dir,
            max_iter=args.max_iter,
            empty_policy=args.empty_policy,
        )
        run(config)
    except (QuantizerError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("Done!")
    return 0

if __name__ == "__main__":
    sys.exit(main())
