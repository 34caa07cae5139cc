"""CLI utilities package."""

from pathlib import Path
from typing import Optional
import click
from ...config import load_config, get_log_level
from ...utils.logging import setup_logging
from .file_resolver import resolve_file_path


def format_error(message: str, suggestion: Optional[str] = None) -> str:
    """
    Format error message with optional suggestion.
    
    Args:
        message: Error message
        suggestion: Optional suggestion or help text
        
    Returns:
        Formatted error string
    """
    error = f"Error: {message}"
    if suggestion:
        error += f"\nTip: {suggestion}"
    return error


def configure_logging(config_path: Optional[str], verbose: bool = False) -> dict:
    """Load configuration and apply its log level (DEBUG when verbose)."""
    config = load_config(config_path)
    setup_logging("DEBUG" if verbose else get_log_level(config))
    return config


def write_output(text: str, output: Optional[str], quiet: bool = False) -> None:
    """Write text to the output file, or to stdout when no file is given."""
    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(text)
        if not quiet:
            click.echo(f"Output saved to: {output_path}", err=True)
    else:
        click.echo(text)


__all__ = ["resolve_file_path", "format_error", "configure_logging", "write_output"]
