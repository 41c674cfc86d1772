# -*- coding: utf-8 -*-
"""
SICD Vocabulary - Enumerations shared across the reader.

Defines the closed set of SICD schema versions and the pixel types a
SICD ``ImageData`` section may declare.

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

from enum import Enum
from typing import Tuple

#: Prefix of the versioned namespace on the SICD XML root element.
SICD_URN_PREFIX = 'urn:SICD:'


class SICDVersion(Enum):
    """Known SICD schema versions, in historical order.

    0.3.1 and 0.4.1 are recognized but have no metadata schema here.
    Every version from 1.0.0 on shares one backward compatible schema.
    """

    V0_3_1 = "0.3.1"
    V0_4_0 = "0.4.0"
    V0_4_1 = "0.4.1"
    V0_5_0 = "0.5.0"
    V1_0_0 = "1.0.0"
    V1_0_1 = "1.0.1"
    V1_1_0 = "1.1.0"
    V1_2_0 = "1.2.0"
    V1_2_1 = "1.2.1"
    V1_3_0 = "1.3.0"

    @property
    def urn(self) -> str:
        """Namespace URN, e.g. ``'urn:SICD:1.3.0'``."""
        return SICD_URN_PREFIX + self.value

    @property
    def version_tuple(self) -> Tuple[int, int, int]:
        """``(major, minor, patch)`` integers."""
        major, minor, patch = self.value.split('.')
        return int(major), int(minor), int(patch)

    @property
    def is_v1(self) -> bool:
        """Whether the version belongs to the shared 1.x schema line."""
        return self.version_tuple[0] >= 1

    @property
    def is_implemented(self) -> bool:
        """Whether metadata of this version can be deserialized."""
        return self not in _UNIMPLEMENTED


_UNIMPLEMENTED = frozenset({SICDVersion.V0_3_1, SICDVersion.V0_4_1})


class PixelType(Enum):
    """Pixel types a SICD ``ImageData/PixelType`` may declare.

    Only ``RE32F_IM32F`` is decoded by this package.
    """

    RE32F_IM32F = "RE32F_IM32F"
    RE16I_IM16I = "RE16I_IM16I"
    AMP8I_PHS8I = "AMP8I_PHS8I"
