# -*- coding: utf-8 -*-
"""
NITF Backend Detection - Detect available NITF parsing libraries.

Probes for jbpy (the NITF/JBP parser used by sarkit) and sarpy at
import time. ``NITFContainer`` uses ``require_nitf_backend`` to pick the
best available parser or raise a clear error when none is installed.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
from typing import Optional

# sicdreader internal
from sicdreader.exceptions import DependencyError

_HAS_JBPY = False
_HAS_SARPY = False

try:
    import jbpy  # noqa: F401
    _HAS_JBPY = True
except ImportError:
    pass

try:
    import sarpy  # noqa: F401
    _HAS_SARPY = True
except ImportError:
    pass

BACKENDS = ('jbpy', 'sarpy')


def require_nitf_backend(requested: Optional[str] = None) -> str:
    """Return the NITF backend to use.

    Parameters
    ----------
    requested : str, optional
        ``'jbpy'`` or ``'sarpy'``. None selects the best available,
        preferring jbpy.

    Returns
    -------
    str
        ``'jbpy'`` or ``'sarpy'``.

    Raises
    ------
    ValueError
        If ``requested`` is not a known backend name.
    DependencyError
        If the requested backend, or any backend when none was
        requested, is not installed.
    """
    available = {'jbpy': _HAS_JBPY, 'sarpy': _HAS_SARPY}
    if requested is not None:
        if requested not in available:
            raise ValueError(
                f"Unknown NITF backend {requested!r}, "
                f"expected one of {BACKENDS}"
            )
        if not available[requested]:
            raise DependencyError(
                f"NITF backend {requested!r} is not installed. "
                f"Install with: pip install {requested}"
            )
        return requested
    if _HAS_JBPY:
        return 'jbpy'
    if _HAS_SARPY:
        return 'sarpy'
    raise DependencyError(
        "Reading SICD NITF files requires jbpy or sarpy. "
        "Install with: pip install jbpy"
    )
