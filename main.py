#!/usr/bin/env python3
"""
main.py

CLI: load a black/white BMP, draw an X from corner to corner, save it.

Usage:
  main.py [INPUT] [OUTPUT] [--quiet] [--debug]

Paths that are not given on the command line are prompted for.
"""

import argparse
import logging
import sys

from controller import Controller

log = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Draw a diagonal cross over a black/white BMP image")
    p.add_argument("infile", nargs="?", help="Input BMP path")
    p.add_argument("outfile", nargs="?", help="Output BMP path")
    p.add_argument("--quiet", action="store_true", help="Do not print the image to the console")
    p.add_argument("--debug", action="store_true")
    return p.parse_args(argv)


def prompt(message: str) -> str:
    try:
        return input(message).strip()
    except EOFError:
        return ""


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    controller = Controller(show=not args.quiet)

    infile = args.infile or prompt(">> Enter input BMP file name: ")
    if not infile or not controller.open_bmp_file(infile):
        sys.stderr.write("Failed to load BMP file.\n")
        return 1

    controller.display_image("Original image")
    controller.apply_cross()
    controller.display_image("Image with X drawn")

    outfile = args.outfile or prompt("\n>> Enter output BMP file name: ")
    if not outfile or not controller.save_bmp_file(outfile):
        sys.stderr.write("Failed to save BMP file.\n")
        return 1

    log.debug("done: %s -> %s", infile, outfile)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
