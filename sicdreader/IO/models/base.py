# -*- coding: utf-8 -*-
"""
IO Models Base - Universal fields shared by every SICD schema target.

Provides ``ImageMetadata``, the dataclass holding what every SICD schema
version can answer (format, rows, cols, dtype). The version-specific
schema targets subclass it and add typed sections.

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
from dataclasses import dataclass


@dataclass
class ImageMetadata:
    """Fields every SICD schema target carries.

    Parameters
    ----------
    format : str
        Format identifier, always ``'SICD'`` here.
    rows : int
        Number of image rows (``ImageData/NumRows``).
    cols : int
        Number of image columns (``ImageData/NumCols``).
    dtype : str
        NumPy dtype string of the decoded pixels (``'complex64'``).
    """

    format: str
    rows: int
    cols: int
    dtype: str
