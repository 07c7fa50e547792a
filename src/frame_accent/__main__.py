"""
frame_accent Command Line Entry Point

Extrahiert die Akzentfarbe eines Bildes (Pfad oder URL) oder eines
Video-Frames und gibt Primär-, Text- und Komplementärfarbe aus.

Usage:
    python -m frame_accent photo.jpg
    python -m frame_accent clip.mp4 --video --position start --json
    python -m frame_accent https://example.org/image.jpg --fallback "#336699"
"""

import argparse
import asyncio
import json
import logging
import sys

from .analysis import (
    ExtractionOptions,
    VideoFrameSource,
    extract_from_image_source,
    extract_from_video_frame,
)
from .core.config import Config
from .core.exceptions import ConfigurationError, LoadFailureError
from .theming import build_theme
from .utils.logger import get_logger, setup_logging
from .utils.video_utils import read_video_frame

logger = get_logger("cli")


def _frame_position(value: str) -> str | int:
    return int(value) if value.isdigit() else value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="frame_accent",
        description="Akzentfarbe aus Bild oder Video-Frame extrahieren",
    )
    parser.add_argument("source", help="Bildpfad, Bild-URL oder Videopfad (mit --video)")
    parser.add_argument("--video", action="store_true", help="Quelle ist ein Video")
    parser.add_argument(
        "--position",
        type=_frame_position,
        default="middle",
        help="Frame-Position: start, middle, end oder Frame-Index (default: middle)",
    )
    parser.add_argument("--config", default=None, help="Pfad zu einer config.ini")
    parser.add_argument("--fallback", default=None, help="Fallback-Farbe #rrggbb")
    parser.add_argument("--sample-size", type=int, default=None)
    parser.add_argument("--no-lower-third", action="store_true")
    parser.add_argument("--no-split-view", action="store_true")
    parser.add_argument("--no-portrait", action="store_true")
    parser.add_argument("--keep-black", action="store_true", help="Schwarze Pixel nicht verwerfen")
    parser.add_argument("--no-boost", action="store_true", help="Kontrast-Boost deaktivieren")
    parser.add_argument("--fallback-only", action="store_true")
    parser.add_argument("--json", action="store_true", help="Ausgabe als JSON")
    parser.add_argument("--log-file", action="store_true", help="Zusätzlich in Log-Datei schreiben")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def build_options(args: argparse.Namespace, config: Config) -> ExtractionOptions:
    """CLI-Flags haben Vorrang vor der config.ini."""
    return config.extraction_options(
        sample_size=args.sample_size,
        fallback_color=args.fallback,
        sample_lower_third=False if args.no_lower_third else None,
        handle_split_view=False if args.no_split_view else None,
        analyze_portrait_video=False if args.no_portrait else None,
        ignore_black_background=False if args.keep_black else None,
        enable_contrast_boost=False if args.no_boost else None,
        use_fallback_only=True if args.fallback_only else None,
    )


def _load_video_frame(path: str, position: str | int) -> VideoFrameSource:
    try:
        frame = read_video_frame(path, position)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Video nicht lesbar: {e}")
        frame = None
    return VideoFrameSource.from_bgr_frame(frame)


def main(argv: list[str] | None = None) -> int:
    """Main entry point; returns the process exit code."""
    args = build_parser().parse_args(argv)

    config = Config(args.config or "config.ini", create=False)
    log_settings = config.logging_settings()
    if args.verbose:
        log_settings["console_level"] = logging.DEBUG
    setup_logging(**log_settings, log_to_file=args.log_file)

    try:
        options = build_options(args, config)
    except ConfigurationError as e:
        print(f"Konfigurationsfehler: {e}", file=sys.stderr)
        return 2

    if args.video:
        color = extract_from_video_frame(_load_video_frame(args.source, args.position), options)
    else:
        try:
            color = asyncio.run(extract_from_image_source(args.source, options))
        except LoadFailureError as e:
            print(f"Bild konnte nicht geladen werden: {e}", file=sys.stderr)
            return 1

    theme = build_theme(color)
    if args.json:
        print(json.dumps(theme.to_dict(), indent=2))
    else:
        print(f"primary:       {color.hex}  rgb{color.rgb}  luminance={color.luminance:.3f}")
        print(f"text:          {theme.text}  contrast={theme.text_contrast:.2f}:1")
        print(f"complementary: {theme.complementary.hex}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
