# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Fragment exceptions."""

from __future__ import annotations


class FragmentError(Exception):
    """Base exception for fragment errors."""

    pass


class InvalidTagError(FragmentError, ValueError):
    """Raised when an element is created with an empty or blank tag name."""

    pass


class RenderError(FragmentError):
    """Raised by a host sink when the emitted sequence breaks stack discipline."""

    pass
