"""
.. This module acts as the top-level API documentation.

.. module: pyqm

Physical quantities tagged with a unit of measure.  The subpackages
provide the detail:

    - ``pyqm.units``: Unit categories and the ``Quantity`` type.
    - ``pyqm.service``: ``MeasurementService`` facade for front ends.
    - ``pyqm.util``: Small parsing / checking helpers.
"""

__version__ = "0.1.0"

import sys

# Written by Eric J. Whitney, November 2019.

# ======================================================================

assert sys.version_info >= (3, 10)
