#!/usr/bin/env python

#
# This file is part of the `omnipath_prior` Python module
#
# Copyright 2026
# Heidelberg University Hospital
#
# File author(s): OmniPath Team (omnipathdb@gmail.com)
#
# Distributed under the BSD-3-Clause license
# See the file `LICENSE` or read a copy at
# https://opensource.org/license/bsd-3-clause
#

"""
Network builder configuration.

Built-in defaults come from a YAML file shipped with the package.
Every builder accepts a ``cfg`` argument, a full config as returned by
:func:`config`; without it the defaults apply.
"""

from __future__ import annotations

__all__ = ['builder_config', 'config', 'default_config']

import copy
from typing import TYPE_CHECKING

import yaml

from ._errors import ConfigurationError
from .data import data_path

if TYPE_CHECKING:
    from pathlib import Path


_SECTIONS = frozenset({'organism', 'organisms', 'client', 'builders'})
_BUILDERS = frozenset({'dorothea', 'collectri', 'progeny'})


def default_config() -> dict:
    """
    Load the built-in default configuration.

    Returns:
        Nested dict with the full default config.
    """

    return _read_yaml(data_path('default_config.yaml'))


def config(
    *layers: dict | Path | str,
    **overrides,
) -> dict:
    """
    Build a configuration by layering overrides on the defaults.

    Args:
        *layers:
            Dicts or paths to YAML files, applied in order.
        **overrides:
            Applied last.  Section names (``organism``, ``organisms``,
            ``client``, ``builders``) are taken as they are, builder
            names as the parameters of that builder.

    Returns:
        Merged configuration dict.

    Raises:
        ConfigurationError: Unknown section or builder, or a YAML file
            that is not a mapping.

    Examples::

        # Flatter DoRothEA weights
        cfg = config(dorothea={'weight_dict': {'A': 1, 'B': 1, 'C': 2, 'D': 2}})
        dorothea = get_dorothea(cfg=cfg)

        # Static snapshots only
        collectri = get_collectri(cfg=config(client={'slow_call_bypass': True}))

        # Load from a YAML file, then override
        cfg = config('my_config.yaml', progeny={'top': 100})
    """

    cfg = default_config()

    for layer in (*layers, _nest_builders(overrides)):
        cfg = _merged(cfg, layer if isinstance(layer, dict) else _read_yaml(layer))

    _validate(cfg)

    return cfg


def builder_config(name: str, cfg: dict | None = None) -> dict:
    """
    Parameters of one builder.

    Args:
        name: Builder name, e.g. ``'dorothea'``.
        cfg: A full config as returned by :func:`config`; the defaults
            are used if ``None``.

    Returns:
        The ``builders.<name>`` section, empty dict if absent.
    """

    cfg = default_config() if cfg is None else cfg

    return cfg.get('builders', {}).get(name) or {}


def _nest_builders(overrides: dict) -> dict:
    """Move builder name keys under ``builders``."""

    nested = {k: v for k, v in overrides.items() if k in _SECTIONS}
    builders = {k: v for k, v in overrides.items() if k not in _SECTIONS}

    if builders:
        nested['builders'] = _merged(nested.get('builders') or {}, builders)

    return nested


def _validate(cfg: dict) -> None:

    unknown = sorted(set(cfg) - _SECTIONS)

    if unknown:
        raise ConfigurationError(
            f'Unknown config sections: {unknown}. '
            f'Available: {sorted(_SECTIONS)}',
        )

    unknown = sorted(set(cfg.get('builders') or {}) - _BUILDERS)

    if unknown:
        raise ConfigurationError(
            f'Unknown builders in config: {unknown}. '
            f'Available: {sorted(_BUILDERS)}',
        )


def _read_yaml(path: Path | str) -> dict:

    with open(path) as f:
        content = yaml.safe_load(f)

    if content is None:
        return {}

    if not isinstance(content, dict):
        raise ConfigurationError(f'Config file `{path}` is not a mapping.')

    return content


def _merged(base: dict, override: dict) -> dict:
    """
    New dict with *override* merged into *base*.

    Nested dicts merge key by key; any other value, lists included,
    replaces the one in *base*.  Neither argument is modified.
    """

    result = dict(base)

    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = _merged(result[key], value)
        else:
            result[key] = copy.deepcopy(value)

    return result
