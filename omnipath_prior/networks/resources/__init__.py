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

"""Network builders, one module per OmniPath resource."""

__all__ = [
    'get_collectri',
    'get_dorothea',
    'get_ksn_omnipath',
    'get_progeny',
    'get_resource',
    'show_resources',
]

from .annotations import get_resource, show_resources
from .collectri import get_collectri
from .dorothea import get_dorothea
from .ksn import get_ksn_omnipath
from .progeny import get_progeny
