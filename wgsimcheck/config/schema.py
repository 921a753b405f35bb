"""
wgsimcheck v0.1.0

Configuration schema for wgsimcheck.

Defines all available configuration parameters with defaults and validation.

Author: wgsimcheck Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import copy
from typing import Dict, Any, Optional, List
from pathlib import Path
import yaml


VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']

# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # Read ID Parsing
    # ========================================================================
    'parsing': {
        'max_id_length': 1023,  # Longer IDs are rejected
        'max_contig_name_length': 199,
        'fail_fast': False,  # Abort on oversized IDs instead of skipping the read
    },

    # ========================================================================
    # Misalignment Judgment
    # ========================================================================
    'judging': {
        'max_k': 20,  # Positional tolerance (bases) around the true interval
    },

    # ========================================================================
    # Genome Layout
    # ========================================================================
    'genome': {
        'contig_gap': 0,  # Padding between contigs in absolute coordinates
    },

    # ========================================================================
    # Read Simulation
    # ========================================================================
    'simulation': {
        'num_reads': 1000,
        'read_length': 100,
        'paired': False,
        'insert_size_mean': 300,
        'insert_size_std': 30,
        'error_rate': 0.0,
        'skip_ambiguous': True,
        'random_seed': None,
    },

    # ========================================================================
    # Logging
    # ========================================================================
    'logging': {
        'level': 'INFO',  # 'DEBUG', 'INFO', 'WARNING', 'ERROR'
        'log_file': None,
    },
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from file or return defaults.

    Args:
        config_path: Path to YAML config file (None = use defaults)

    Returns:
        Configuration dictionary
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path:
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path) as f:
                user_config = yaml.safe_load(f)

            if user_config:
                # Deep merge user config into defaults
                config = deep_merge(config, user_config)

    return config


def deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries; values in override win.

    Args:
        base: Base dictionary (defaults)
        override: Override dictionary (user values)

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def save_config_template(output_path: Path, template: str = 'default'):
    """
    Save a configuration template to file.

    Args:
        output_path: Output file path
        template: Template type ('default', 'single', 'paired', 'strict')
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    # Customize for specific templates
    if template == 'single':
        config['simulation']['paired'] = False
        config['judging']['max_k'] = 20

    elif template == 'paired':
        config['simulation']['paired'] = True
        config['simulation']['read_length'] = 150
        config['simulation']['insert_size_mean'] = 400
        config['simulation']['insert_size_std'] = 40

    elif template == 'strict':
        config['judging']['max_k'] = 0
        config['parsing']['fail_fast'] = True

    with open(output_path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _section(config: Dict[str, Any], name: str, errors: List[str]) -> Dict[str, Any]:
    section = config.get(name) or {}
    if not isinstance(section, dict):
        errors.append(f"{name} must be a mapping, got {section!r}")
        return {}
    return section


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    parsing = _section(config, 'parsing', errors)
    for key in ('max_id_length', 'max_contig_name_length'):
        value = parsing.get(key)
        if not _is_int(value) or value <= 0:
            errors.append(f"parsing.{key} must be a positive integer, got {value!r}")
    if (_is_int(parsing.get('max_id_length'))
            and _is_int(parsing.get('max_contig_name_length'))
            and parsing['max_contig_name_length'] >= parsing['max_id_length']):
        errors.append("parsing.max_contig_name_length must be smaller than parsing.max_id_length")
    if not isinstance(parsing.get('fail_fast', False), bool):
        errors.append(f"parsing.fail_fast must be true or false, got {parsing.get('fail_fast')!r}")

    max_k = _section(config, 'judging', errors).get('max_k')
    if not _is_int(max_k) or max_k < 0:
        errors.append(f"judging.max_k must be a non-negative integer, got {max_k!r}")

    gap = _section(config, 'genome', errors).get('contig_gap', 0)
    if not _is_int(gap) or gap < 0:
        errors.append(f"genome.contig_gap must be a non-negative integer, got {gap!r}")

    sim = _section(config, 'simulation', errors)
    for key in ('num_reads', 'insert_size_mean', 'insert_size_std'):
        value = sim.get(key, 0)
        if not _is_int(value) or value < 0:
            errors.append(f"simulation.{key} must be a non-negative integer, got {value!r}")
    read_length = sim.get('read_length')
    if not _is_int(read_length) or read_length <= 0:
        errors.append(f"simulation.read_length must be a positive integer, got {read_length!r}")
    elif (sim.get('paired') and _is_int(sim.get('insert_size_mean', 0))
            and sim.get('insert_size_mean', 0) < read_length):
        errors.append("simulation.insert_size_mean must be at least simulation.read_length")
    error_rate = sim.get('error_rate', 0.0)
    if (not isinstance(error_rate, (int, float)) or isinstance(error_rate, bool)
            or not 0.0 <= error_rate <= 1.0):
        errors.append(f"simulation.error_rate must be in [0, 1], got {error_rate!r}")

    level = str(_section(config, 'logging', errors).get('level', 'INFO')).upper()
    if level not in VALID_LOG_LEVELS:
        errors.append(f"Invalid logging level: {level}")

    return errors
