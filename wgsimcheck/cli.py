#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for wgsimcheck.

This module provides the main CLI entry point and all subcommands for
decoding wgsim read IDs, simulating reads and scoring aligner output.
"""

import sys
import logging
import click
from pathlib import Path
from typing import Optional
import yaml

from .version import __version__
from .config.parser import ConfigParser, ConfigValidationError
from .config.schema import load_config, save_config_template, validate_config
from .core.errors import ContigLookupError, IdTooLongError
from .core.genome import ContigRecord, ContigTable
from .core.id_generator import generate_wgsim_id, generate_wgsim_id_at_location
from .core.id_parser import parse_wgsim_id
from .core.judge import judge_read
from .core.normalizer import normalize_offsets

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool, quiet: bool, config: ConfigParser):
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = getattr(logging, str(config.get('logging.level', 'INFO')).upper(), logging.INFO)

    handlers = [logging.StreamHandler(sys.stderr)]
    log_file = config.get('logging.log_file')
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )


def _load_contig_table(reference: Optional[str], fai: Optional[str], gap: int) -> ContigTable:
    """Build the contig table from exactly one of --reference / --fai."""
    if bool(reference) == bool(fai):
        raise click.UsageError("Give exactly one of --reference or --fai")
    if fai:
        return ContigTable.from_fai(Path(fai), gap=gap)
    return ContigTable.from_fasta(Path(reference), gap=gap)


def _fatal(message: str):
    click.echo(f"✗ {message}", err=True)
    sys.exit(1)


reference_option = click.option('--reference', '-r', type=click.Path(exists=True),
                                help='Reference FASTA the reads were simulated from')
fai_option = click.option('--fai', type=click.Path(exists=True),
                          help='samtools faidx index of the reference (instead of --reference)')


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
              help='YAML configuration file')
@click.pass_context
def main(ctx, verbose, quiet, config_file):
    """
    wgsimcheck: wgsim read ID codec and aligner correctness checks

    Decodes the true origin that wgsim-style read names carry, judges whether
    an aligner placed each read within a tolerance of that origin, and
    generates synthetic reads named the same way.
    """
    ctx.ensure_object(dict)
    try:
        config = ConfigParser(config_file)
        config.validate()
    except ConfigValidationError as e:
        _fatal(f"Invalid configuration: {e}")

    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet
    ctx.obj['CONFIG'] = config
    _configure_logging(verbose, quiet, config)


# ============================================================================
# Codec Commands
# ============================================================================

@main.command('parse')
@click.argument('read_ids', nargs=-1, required=True)
@reference_option
@fai_option
@click.pass_context
def parse_cmd(ctx, read_ids, reference, fai):
    """Decode contig and offsets from one or more read IDs."""
    config = ctx.obj['CONFIG']
    settings = config.codec_settings()
    table = None
    if reference or fai:
        table = _load_contig_table(reference, fai, config.get('genome.contig_gap', 0))

    n_failed = 0
    for read_id in read_ids:
        try:
            parsed = parse_wgsim_id(read_id, settings)
        except IdTooLongError as e:
            _fatal(str(e))

        if not parsed.ok:
            n_failed += 1
            click.echo(f"{read_id}\tFAIL\t{parsed.kind.value}\t{parsed.detail}")
            continue

        fields = [read_id, parsed.contig_name, str(parsed.begin), str(parsed.end)]
        if table is not None:
            interval = normalize_offsets(parsed, table, raw_id=read_id)
            if not interval.ok:
                n_failed += 1
                click.echo(f"{read_id}\tFAIL\t{interval.kind.value}\t{interval.detail}")
                continue
            fields += [str(interval.low), str(interval.high)]
        click.echo("\t".join(fields))

    if n_failed:
        sys.exit(1)


@main.command('judge')
@click.argument('read_id')
@click.argument('location', type=int)
@reference_option
@fai_option
@click.option('--max-k', '-k', type=int, default=None,
              help='Positional tolerance in bases (default from config)')
@click.pass_context
def judge_cmd(ctx, read_id, location, reference, fai, max_k):
    """Judge whether LOCATION (0-based, absolute) is a misalignment of READ_ID."""
    config = ctx.obj['CONFIG']
    config.merge_cli_overrides({'judging.max_k': max_k})
    max_k = config.get('judging.max_k')
    table = _load_contig_table(reference, fai, config.get('genome.contig_gap', 0))

    try:
        result = judge_read(read_id, location, table, max_k, config.codec_settings())
    except IdTooLongError as e:
        _fatal(str(e))
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='--max-k')

    if not result.ok:
        _fatal(str(result))

    verdict = "misaligned" if result.misaligned else "aligned"
    click.echo(f"{verdict}\tlow={result.interval.low}\thigh={result.interval.high}"
               f"\tlocation={location}\tmax_k={max_k}")


@main.command('generate')
@reference_option
@fai_option
@click.option('--contig', help='Contig name (with --offset)')
@click.option('--offset', type=int, help='0-based offset within --contig')
@click.option('--location', type=int, help='0-based absolute genome location')
@click.option('--length', '-l', 'read_length', type=int, required=True, help='Read length')
@click.option('--mate', type=click.Choice(['1', '2']), default='1', help='Mate number')
@click.pass_context
def generate_cmd(ctx, reference, fai, contig, offset, location, read_length, mate):
    """Generate a wgsim-style read ID for a contig offset or genome location."""
    config = ctx.obj['CONFIG']
    first_half = mate == '1'

    try:
        if location is not None:
            table = _load_contig_table(reference, fai, config.get('genome.contig_gap', 0))
            read_id = generate_wgsim_id_at_location(table, location, read_length, first_half)
        elif contig is not None and offset is not None:
            read_id = generate_wgsim_id(ContigRecord(name=contig, base_offset=0),
                                        offset, read_length, first_half)
        else:
            raise click.UsageError("Give either --location or both --contig and --offset")
    except ContigLookupError as e:
        _fatal(str(e))
    except ValueError as e:
        raise click.BadParameter(str(e))

    click.echo(read_id)


# ============================================================================
# Simulation and Evaluation Commands
# ============================================================================

@main.command('simulate')
@click.option('--reference', '-r', type=click.Path(exists=True), required=True,
              help='Reference FASTA to sample reads from')
@click.option('--output', '-o', required=True,
              help='Output prefix (writes PREFIX.fq, or PREFIX_1.fq and PREFIX_2.fq)')
@click.option('--num-reads', '-n', type=int, default=None, help='Reads or pairs to simulate')
@click.option('--read-length', '-l', type=int, default=None, help='Read length (bp)')
@click.option('--paired/--single', default=None, help='Simulate read pairs')
@click.option('--error-rate', type=float, default=None, help='Substitution error rate')
@click.option('--seed', type=int, default=None, help='Random seed')
@click.option('--compress', is_flag=True, help='gzip the output FASTQ')
@click.pass_context
def simulate_cmd(ctx, reference, output, num_reads, read_length, paired, error_rate, seed, compress):
    """Simulate reads named with wgsim-style IDs."""
    from .io.fastq import load_reference, write_fastq
    from .simulation.read_simulator import ReadSimulator, SimulationConfig

    config = ctx.obj['CONFIG']
    config.merge_cli_overrides({
        'simulation.num_reads': num_reads,
        'simulation.read_length': read_length,
        'simulation.paired': paired,
        'simulation.error_rate': error_rate,
        'simulation.random_seed': seed,
    })

    sequences = load_reference(Path(reference))
    table = ContigTable.from_sequences(sequences, gap=config.get('genome.contig_gap', 0))

    try:
        simulator = ReadSimulator(sequences, table, SimulationConfig.from_config(config.to_dict()))
        mates1, mates2 = simulator.simulate()
    except ValueError as e:
        _fatal(str(e))

    if mates2 is None:
        write_fastq(mates1, Path(f"{output}.fq"), compress=compress)
        click.echo(f"✓ Wrote {len(mates1):,} reads to {output}.fq")
    else:
        write_fastq(mates1, Path(f"{output}_1.fq"), compress=compress)
        write_fastq(mates2, Path(f"{output}_2.fq"), compress=compress)
        click.echo(f"✓ Wrote {len(mates1):,} read pairs to {output}_1.fq / {output}_2.fq")


@main.command('evaluate')
@click.argument('alignment_file', type=click.Path(exists=True))
@reference_option
@fai_option
@click.option('--max-k', '-k', type=int, default=None,
              help='Positional tolerance in bases (default from config)')
@click.option('--output', '-o', type=click.Path(), help='Write the per-MAPQ table as TSV')
@click.pass_context
def evaluate_cmd(ctx, alignment_file, reference, fai, max_k, output):
    """Score an aligner's SAM or BAM output against the truth in the read names."""
    from .evaluation.sam_evaluator import AlignmentEvaluator

    config = ctx.obj['CONFIG']
    config.merge_cli_overrides({'judging.max_k': max_k})
    table = _load_contig_table(reference, fai, config.get('genome.contig_gap', 0))

    try:
        evaluator = AlignmentEvaluator(table, config.get('judging.max_k'), config.codec_settings())
        summary = evaluator.evaluate_file(Path(alignment_file))
    except IdTooLongError as e:
        _fatal(str(e))
    except (ValueError, OSError) as e:
        _fatal(f"Error evaluating {alignment_file}: {e}")

    click.echo(f"Primary records: {summary.total:,}")
    click.echo(f"  Correct:            {summary.correct:,}")
    click.echo(f"  Misaligned:         {summary.misaligned:,}")
    click.echo(f"  Unmapped:           {summary.unmapped:,}")
    click.echo(f"  Unknown reference:  {summary.unknown_reference:,}")
    click.echo(f"  Unparseable IDs:    {summary.failed:,}")
    click.echo(f"  Error rate:         {summary.error_rate:.4%}")

    if output:
        summary.to_dataframe().to_csv(output, sep='\t', index=False)
        click.echo(f"✓ Per-MAPQ table written to {output}")


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command('init')
@click.option('--output', '-o', type=click.Path(), default='wgsimcheck_config.yaml',
              help='Output configuration file path')
@click.option('--template', '-t',
              type=click.Choice(['default', 'single', 'paired', 'strict']),
              default='default', help='Configuration template type')
def config_init(output, template):
    """Generate a template configuration file with all available parameters."""
    click.echo(f"Generating {template} configuration template: {output}")

    try:
        save_config_template(Path(output), template=template)
        click.echo(f"✓ Configuration file created: {output}")
    except OSError as e:
        _fatal(f"Error creating configuration: {e}")


@config.command('validate')
@click.argument('config_file', type=click.Path(exists=True))
def config_validate(config_file):
    """Validate a configuration file."""
    click.echo(f"Validating configuration file: {config_file}")

    try:
        cfg = load_config(Path(config_file))
    except yaml.YAMLError as e:
        _fatal(f"Error validating configuration: {e}")

    errors = validate_config(cfg)
    if errors:
        click.echo("\n✗ Configuration validation failed:")
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    click.echo("✓ Configuration is valid")
    click.echo("\nKey Settings:")
    click.echo(f"  max_k: {cfg['judging']['max_k']}")
    click.echo(f"  Max ID length: {cfg['parsing']['max_id_length']}")
    click.echo(f"  Fail fast: {cfg['parsing']['fail_fast']}")


@config.command('show')
@click.argument('config_file', type=click.Path(exists=True))
@click.option('--format', '-f', type=click.Choice(['yaml', 'summary']), default='summary',
              help='Output format')
def config_show(config_file, format):
    """Display configuration settings."""
    try:
        cfg = load_config(Path(config_file))
    except yaml.YAMLError as e:
        _fatal(f"Error reading configuration: {e}")

    if format == 'yaml':
        click.echo(yaml.dump(cfg, default_flow_style=False, sort_keys=False))
        return

    click.echo(f"Configuration from: {config_file}")
    click.echo("=" * 60)
    click.echo("\nParsing:")
    click.echo(f"  Max ID length: {cfg['parsing']['max_id_length']}")
    click.echo(f"  Max contig name length: {cfg['parsing']['max_contig_name_length']}")
    click.echo(f"  Fail fast: {cfg['parsing']['fail_fast']}")
    click.echo("\nJudging:")
    click.echo(f"  max_k: {cfg['judging']['max_k']}")
    click.echo("\nSimulation:")
    sim = cfg['simulation']
    mode = "paired" if sim['paired'] else "single"
    click.echo(f"  {sim['num_reads']:,} {mode}-end reads of {sim['read_length']} bp")


if __name__ == '__main__':
    main()
