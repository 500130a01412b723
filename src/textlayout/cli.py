"""CLI interface for the text layout engine."""

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Callable

import click
from pydantic import ValidationError

from textlayout.config import StyleSettings, load_style
from textlayout.engine import layout
from textlayout.fonts import register_fonts
from textlayout.fonts.metrics import PillowMetrics, ReportLabMetrics
from textlayout.metrics import FixedWidthMetrics, MeasureText
from textlayout.render.image import render_text

METRICS = {
    "fixed": FixedWidthMetrics,
    "reportlab": ReportLabMetrics,
    "pillow": PillowMetrics,
}


def style_options(command: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the style options shared by all layout commands."""
    options = [
        click.option(
            "--style",
            type=click.Path(exists=True, path_type=Path),
            help="Path to a TOML style file. Command line options override its values.",
        ),
        click.option("--font-face", multiple=True, help="Font family (repeat for a fallback list)."),
        click.option("--font-style", type=str, help="Font style, e.g. 'bold' or 'italic'."),
        click.option("--font-size", type=float, help="Font size in layout units."),
        click.option("--width", "w", type=float, help="Box width. Auto-sized if not specified."),
        click.option("--height", "h", type=float, help="Box height. Auto-sized if not specified."),
        click.option("--wrap-width", "word_wrap_width", type=float, help="Wrap width (default: inner width)."),
        click.option("--no-wrap", is_flag=True, help="Only break lines at explicit newlines."),
        click.option("--max-lines", type=int, help="Maximum number of visible lines."),
        click.option("--suffix", "max_lines_suffix", type=str, help="Suffix for the last line when truncated."),
        click.option("--line-height", type=float, help="Distance between baselines."),
        click.option(
            "--align",
            "text_align",
            type=click.Choice(["left", "center", "right"], case_sensitive=False),
            help="Horizontal text alignment.",
        ),
        click.option("--precision", type=float, help="Output scale factor (e.g., 2 for high density)."),
        click.option(
            "--metrics",
            type=click.Choice(list(METRICS.keys()), case_sensitive=False),
            default="fixed",
            show_default=True,
            help="Text measurement backend.",
        ),
        click.option(
            "--fonts-dir",
            type=click.Path(exists=True, file_okay=False, path_type=Path),
            help="Directory of .ttf files to register before measuring.",
        ),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def _build_settings(text: str, style: Path | None, no_wrap: bool, **options: Any) -> StyleSettings:
    """Build style settings from a style file and command line overrides."""
    overrides = {key: value for key, value in options.items() if value not in (None, ())}
    if no_wrap:
        overrides["word_wrap"] = False

    if style:
        return load_style(style, text=text, **overrides)
    return StyleSettings(text=text, **overrides)


def _make_metrics(name: str, fonts_dir: Path | None) -> MeasureText:
    if fonts_dir:
        register_fonts(fonts_dir)
    return METRICS[name.lower()]()


@click.group()
@click.version_option()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """Lay out word-wrapped text and render it to images."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("text")
@style_options
def measure(text: str, style: Path | None, no_wrap: bool, metrics: str, fonts_dir: Path | None, **options: Any) -> None:
    """
    Print the layout of TEXT as JSON.

    Output contains box size, visible lines, line widths, whether text was
    truncated and the remaining text.
    """
    try:
        settings = _build_settings(text, style, no_wrap, **options)
        result = layout(settings, _make_metrics(metrics, fonts_dir), draw=False)
        click.echo(json.dumps(asdict(result.info), indent=2))

    except (FileNotFoundError, ValueError, ValidationError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


@main.command()
@click.argument("text")
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    required=True,
    help="Output image file path (format from extension, e.g. .png).",
)
@style_options
def render(
    text: str,
    output: Path,
    style: Path | None,
    no_wrap: bool,
    metrics: str,
    fonts_dir: Path | None,
    **options: Any,
) -> None:
    """Render TEXT to an image file."""
    try:
        settings = _build_settings(text, style, no_wrap, **options)
        info, image = render_text(settings, _make_metrics(metrics, fonts_dir))
        image.save(output)

        click.echo(f"✓ Rendered {len(info.lines)} line(s) ({image.width}x{image.height}) to: {output}")
        if info.more_text_lines:
            click.echo(f"  Truncated, remaining text: {info.remaining_text!r}")

    except (FileNotFoundError, ValueError, ValidationError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
