"""
============================
Utilities (:mod:`pyqm.util`)
============================

.. currentmodule:: pyqm.util

Collection of less-utilities / functions / operations used in various
contexts.

Type Operations
---------------

.. autosummary::
    :toctree:

    all_finite
    round_half_away
    try_parse_float

"""

from .type_ops import all_finite, round_half_away, try_parse_float
