"""CLI interface for dify2md."""

from __future__ import annotations

import logging
import sys

import click

from . import __version__
from .config import DEFAULT_AI_LABEL, DEFAULT_TITLE, DEFAULT_USER_LABEL
from .converter import convert
from .errors import ConversionError
from .renderer import markdown_to_html


@click.command()
@click.version_option(version=__version__, prog_name="dify2md")
@click.argument("input_file", type=click.File("r", encoding="utf-8-sig"), default="-")
@click.option("-o", "--output", type=click.File("w", encoding="utf-8"), default="-",
              help="Write the result to this file instead of stdout")
@click.option("-u", "--user-label", default=DEFAULT_USER_LABEL, show_default=True,
              help="Label for the user's messages")
@click.option("-a", "--ai-label", default=DEFAULT_AI_LABEL, show_default=True,
              help="Label for the AI's messages")
@click.option("-m", "--message-id", default=None,
              help="Start from this message instead of the last one")
@click.option("--title", default=DEFAULT_TITLE, show_default=True,
              help="Heading of the transcript")
@click.option("--swap-labels", is_flag=True, help="Swap the user and AI labels")
@click.option("--html", "as_html", is_flag=True,
              help="Emit an HTML preview instead of Markdown")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def cli(input_file, output, user_label: str, ai_label: str, message_id: str | None,
        title: str, swap_labels: bool, as_html: bool, verbose: bool):
    """Convert a Dify chat history export to Markdown.

    Reads the export JSON from INPUT_FILE (or stdin) and writes the linear
    conversation ending at the last message, or at --message-id.

    Example:
        dify2md export.json -o chat.md --user-label Me --ai-label Bot
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if swap_labels:
        user_label, ai_label = ai_label, user_label

    try:
        raw_json = input_file.read()
    except UnicodeDecodeError as exc:
        raise click.ClickException(f"Input is not valid UTF-8: {exc}") from exc

    try:
        result = convert(
            raw_json,
            user_label=user_label,
            ai_label=ai_label,
            start_message_id=message_id,
            title=title,
        )
    except ConversionError as exc:
        raise click.ClickException(str(exc)) from exc

    text = markdown_to_html(result.markdown) if as_html else result.markdown
    click.echo(text, file=output)
    click.echo(
        click.style(f"Successfully converted {result.count} messages", fg="green"),
        err=True,
    )
