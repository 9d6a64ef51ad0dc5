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

"""Prior-knowledge annotation resources from OmniPath."""

from __future__ import annotations

__all__ = ['get_resource', 'show_resources']

import logging

import pandas as pd

from .._client import OmnipathClient, QueryKind
from .._config import default_config
from .._errors import ResourceNotFound, TransientFetchFailure
from .._organism import configured_organism

_log = logging.getLogger(__name__)


def show_resources(
    client: OmnipathClient | None = None,
    cfg: dict | None = None,
) -> list[str]:
    """
    Annotation resources available in OmniPath.

    For more information visit https://omnipathdb.org/.

    Returns:
        Sorted list of resource names.
    """

    client = client or OmnipathClient.from_config(cfg)

    return sorted(client.annotation_resources())


def _check_resource(name: str, client: OmnipathClient) -> bool | None:
    """
    Look up *name* among the available resources.

    Returns:
        Whether the resource is listed, ``None`` if the list of
        resources is not available.
    """

    try:
        available = client.annotation_resources()
    except TransientFetchFailure:
        _log.warning(
            '[OmniPath] Failed to check the list of available resources '
            'in OmniPath. Proceeding anyways.',
        )
        return None

    if name not in available:
        _log.warning(
            '[OmniPath] `%s` is not a valid resource. Run '
            '`show_resources()` to see the list of available resources.',
            name,
        )
        return False

    return True


def get_resource(
    name: str,
    organism: str | int | None = None,
    client: OmnipathClient | None = None,
    cfg: dict | None = None,
    **kwargs,
) -> pd.DataFrame:
    """
    Annotation resource from OmniPath in wide format.

    Run :func:`show_resources` to see the available resources.  For
    mouse and rat, UniProt IDs are translated to their orthologs and
    gene symbols are derived from the translated UniProt IDs.

    Args:
        name:
            Name of the resource, e.g. ``'PROGENy'``.
        organism:
            Human, mouse or rat, by name or NCBI Taxonomy ID;
            defaults to the configured organism.
        client:
            OmniPath data access; a client from *cfg* is used if
            ``None``.
        cfg:
            Config as returned by :func:`config`; the built-in
            defaults if ``None``.
        **kwargs:
            Passed to the annotations query.

    Returns:
        DataFrame with one row per annotated entity.

    Raises:
        UnsupportedOrganism: Organism other than human, mouse or rat.
        ResourceNotFound: Neither the live nor the static table could
            be retrieved.

    Examples::

        df = get_resource('SIGNOR')
    """

    cfg = default_config() if cfg is None else cfg
    organism = configured_organism(organism, cfg)
    client = client or OmnipathClient.from_config(cfg)
    listed = _check_resource(name, client)

    try:
        df = client.with_fallback(
            lambda: client.annotations(name, **kwargs),
            QueryKind.ANNOTATIONS,
            name,
            organism,
        )
    except TransientFetchFailure as e:
        msg = (
            f'Failed to download annotation resource `{name}` from OmniPath'
            + (' (not listed among the available resources).' if listed is False else '.')
        )
        _log.error('[OmniPath] %s', msg)
        raise ResourceNotFound(name, msg) from e

    if organism != 9606:
        df = client.translate_orthology(df, 'uniprot', target_organism=organism)
        df = client.translate_ids(df, 'uniprot', 'genesymbol', organism=organism)

    return df
