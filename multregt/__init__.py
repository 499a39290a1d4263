"""Region to region transmissibility multiplier library.

.. autosummary::
    :toctree: _autosummary
    :caption: API Reference
    :template: custom-module-template.rst
    :recursive:

    deck
    grid
    multregt
    olio
"""

import logging

__version__ = "0.0.0"  # Set at build time
log = logging.getLogger(__name__)
log.info(f"Imported multregt version {__version__}")
