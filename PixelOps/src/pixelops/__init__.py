# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""PixelOps: RGB pixel-grid filters, geometry and edge detection.

Pure operations over in-memory 8-bit RGB images: sepia, channel
intensity, horizontal flip, 180° rotation and neighbor-distance edge
detection.
"""

import logging

__version__ = "0.1.0"
__author__ = "Vasile Lucian Borbeleac"
__copyright__ = "© 2024-2026 FRAGMERGENT TECHNOLOGY S.R.L."

logging.getLogger(__name__).addHandler(logging.NullHandler())
