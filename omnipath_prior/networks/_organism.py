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

"""Organism names and NCBI Taxonomy IDs accepted by the builders."""

from __future__ import annotations

__all__ = [
    'COMMON_TO_NCBI',
    'SUPPORTED_ORGANISMS',
    'check_organism',
    'configured_organism',
]

import logging
from collections.abc import Mapping

from ._errors import UnsupportedOrganism

_log = logging.getLogger(__name__)

COMMON_TO_NCBI = {
    'human': 9606,
    'mouse': 10090,
    'rat': 10116,
}
SUPPORTED_ORGANISMS = frozenset(COMMON_TO_NCBI.values())


def _registry_lookup(organism: str | int) -> int | None:
    """Translate *organism* by the pypath taxonomy registry."""

    from pypath.utils import taxonomy

    return taxonomy.ensure_ncbi_tax_id(organism)


def _local_lookup(
    organism: str | int,
    mapping: Mapping[str, int],
) -> str | int:
    """
    Translate *organism* by the fixed name to taxon mapping.

    Unknown names are returned unchanged so the caller can report them.
    """

    if isinstance(organism, int):
        return organism

    key = str(organism).strip().lower()

    if key in mapping:
        return int(mapping[key])

    return int(key) if key.isdigit() else organism


def check_organism(
    organism: str | int,
    mapping: Mapping[str, int] | None = None,
) -> int:
    """
    Resolve an organism designator to an NCBI Taxonomy ID.

    The pypath taxonomy registry is asked first; if it fails or does not
    know the name, the fixed local mapping is used.  Only human, mouse
    and rat are supported.

    Args:
        organism:
            Common name (case-insensitive, e.g. ``'Mouse'``) or NCBI
            Taxonomy ID (``10090`` or ``'10090'``).
        mapping:
            Name to taxon mapping used as fallback; defaults to
            :data:`COMMON_TO_NCBI`.

    Returns:
        One of ``9606``, ``10090`` or ``10116``.

    Raises:
        UnsupportedOrganism: For any other organism.
    """

    mapping = COMMON_TO_NCBI if mapping is None else mapping

    try:
        ncbi_tax_id = _registry_lookup(organism)
    except Exception as e:
        _log.debug(
            '[OmniPath] Taxonomy registry lookup of `%s` failed: %s',
            organism,
            e,
        )
        ncbi_tax_id = None

    if ncbi_tax_id is None:
        ncbi_tax_id = _local_lookup(organism, mapping)

    if ncbi_tax_id not in SUPPORTED_ORGANISMS:
        raise UnsupportedOrganism(organism)

    return int(ncbi_tax_id)


def configured_organism(organism: str | int | None, cfg: dict) -> int:
    """
    Resolve *organism* with the settings of a config.

    The configured ``organism`` is used if *organism* is ``None``, and
    the configured ``organisms`` mapping is the local fallback.
    """

    return check_organism(
        cfg.get('organism', 'human') if organism is None else organism,
        mapping=cfg.get('organisms'),
    )
