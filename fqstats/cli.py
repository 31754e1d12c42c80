#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for FqStats.

This module provides the main CLI entry point and all subcommands. The CLI
owns everything presentational: reading the file, formatting numbers and
reporting errors. The statistics themselves come from fqstats.utils.pipeline.
"""

import json
import logging
import sys
from pathlib import Path

import click
import yaml

from .version import __version__
from .config.schema import (
    OUTPUT_FORMATS,
    load_config,
    resolve_log_level,
    save_config_template,
    validate_config,
)
from .errors import FqStatsError
from .io.decompress import decode
from .io.parser import detect_format
from .utils.formatting import format_stats_summary, format_stats_tsv
from .utils.pipeline import classify_extension, process_input, read_input

logger = logging.getLogger(__name__)


def _setup_logging(ctx, config):
    """Configure root logging from CLI flags and the loaded configuration."""
    level = resolve_log_level(config, ctx.obj.get('VERBOSE', False), ctx.obj.get('QUIET', False))
    logging.basicConfig(
        level=level,
        format=config['logging']['format'],
        datefmt='%H:%M:%S',
    )


def _load_config_or_exit(config_file, validate=False):
    try:
        config = load_config(Path(config_file) if config_file else None)
    except (FqStatsError, FileNotFoundError) as e:
        click.echo(f"✗ Error loading configuration: {e}", err=True)
        sys.exit(1)

    if validate:
        errors = validate_config(config)
        if errors:
            click.echo("✗ Invalid configuration:", err=True)
            for error in errors:
                click.echo(f"  • {error}", err=True)
            sys.exit(1)

    return config


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose (DEBUG) logging')
@click.option('--quiet', '-q', is_flag=True, help='Only log errors')
@click.pass_context
def main(ctx, verbose, quiet):
    """
    FqStats: summary statistics for FASTA/FASTQ files
    
    Reports sequence count, total bases, shortest/longest/mean length, N50
    and optionally GC content. Plain and gzip-compressed files are supported.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet


# ============================================================================
# Statistics Commands
# ============================================================================

@main.command()
@click.argument('input_file', type=click.Path(dir_okay=False))
@click.option('--gc/--no-gc', default=None,
              help='Compute GC content (default: statistics.compute_gc from config)')
@click.option('--format', '-f', 'output_format', type=click.Choice(OUTPUT_FORMATS), default=None,
              help='Output format (default: output.format from config)')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
              help='YAML configuration file')
@click.pass_context
def stats(ctx, input_file, gc, output_format, config_file):
    """
    Compute summary statistics for one FASTA/FASTQ file.
    
    Examples:
        # Basic statistics
        fqstats stats reads.fastq.gz
        
        # With GC content, as JSON
        fqstats stats assembly.fa --gc --format json
    """
    config = _load_config_or_exit(config_file, validate=True)
    _setup_logging(ctx, config)

    compute_gc = config['statistics']['compute_gc'] if gc is None else gc
    output_format = output_format or config['output']['format']
    name = Path(input_file).name
    
    try:
        result = process_input(read_input(input_file), compute_gc=compute_gc)
    except FqStatsError as e:
        logger.debug("Processing failed", exc_info=True)
        click.echo(f"✗ Error processing {name}: {e}", err=True)
        sys.exit(1)
    
    if output_format == 'json':
        click.echo(json.dumps(result.to_dict(), indent=2))
    elif output_format == 'yaml':
        click.echo(yaml.safe_dump(result.to_dict(), default_flow_style=False, sort_keys=False), nl=False)
    elif output_format == 'tsv':
        click.echo(format_stats_tsv(result))
    else:
        click.echo("Sequence Statistics")
        click.echo("=" * 40)
        click.echo(format_stats_summary(result))


@main.command()
@click.argument('input_file', type=click.Path(dir_okay=False))
@click.pass_context
def detect(ctx, input_file):
    """
    Report how a file is classified by name and by content.
    
    The extension is informational only; statistics always follow the
    content, which is classified from its first line.
    """
    _setup_logging(ctx, load_config())
    
    name = Path(input_file).name
    format_hint, compressed = classify_extension(name)
    
    click.echo(f"File: {name}")
    hint = format_hint.value.upper() if format_hint else 'unrecognised'
    click.echo(f"Extension: {hint}{' (gzip)' if compressed else ''}")
    
    try:
        content_format = detect_format(decode(read_input(input_file)))
    except FqStatsError as e:
        click.echo(f"✗ Error processing {name}: {e}", err=True)
        sys.exit(1)
    
    click.echo(f"Content: {content_format.value.upper()}")


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command('init')
@click.option('--output', '-o', type=click.Path(), default='fqstats_config.yaml',
              help='Output configuration file path')
@click.option('--gc/--no-gc', default=False, help='Enable GC content in the template')
def config_init(output, gc):
    """Generate a template configuration file with all available parameters."""
    click.echo(f"Generating configuration template: {output}")
    
    try:
        save_config_template(Path(output), compute_gc=gc)
    except OSError as e:
        click.echo(f"✗ Error creating configuration: {e}", err=True)
        sys.exit(1)
    
    click.echo(f"✓ Configuration file created: {output}")


@config.command('validate')
@click.argument('config_file', type=click.Path(exists=True))
def config_validate(config_file):
    """Validate a configuration file."""
    click.echo(f"Validating configuration file: {config_file}")
    
    config = _load_config_or_exit(config_file)
    errors = validate_config(config)
    
    if errors:
        click.echo("\n✗ Configuration validation failed:", err=True)
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)
    
    click.echo("✓ Configuration is valid")


@config.command('show')
@click.argument('config_file', type=click.Path(exists=True))
@click.option('--format', '-f', 'output_format', type=click.Choice(['yaml', 'summary']),
              default='summary', help='Output format')
def config_show(config_file, output_format):
    """Display configuration settings."""
    config = _load_config_or_exit(config_file, validate=True)

    if output_format == 'yaml':
        click.echo(yaml.dump(config, default_flow_style=False, sort_keys=False))
        return
    
    click.echo(f"Configuration from: {config_file}")
    click.echo("=" * 60)
    click.echo(f"  GC content: {'ENABLED' if config['statistics']['compute_gc'] else 'DISABLED'}")
    click.echo(f"  Output format: {config['output']['format']}")
    click.echo(f"  Log level: {config['logging']['level']}")


if __name__ == '__main__':
    main()
