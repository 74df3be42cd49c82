#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
The bit-set that configures a `xmlencoder.escaper.TextEscaper`. It selects the quoting
style, the policy for invalid code unit sequences, and the markup dialect whose reference
rules apply. The numeric values are the ones commonly used for this family of flags, so
configurations can be exchanged as plain integers.
"""
from __future__ import annotations

from enum import IntEnum, IntFlag
from typing import Any, Optional


class ENT(IntFlag):
    NOQUOTES    = 0x00  # noqa
    SINGLE      = 0x01  # noqa
    COMPAT      = 0x02  # noqa
    QUOTES      = 0x03  # noqa
    IGNORE      = 0x04  # noqa
    SUBSTITUTE  = 0x08  # noqa
    HTML401     = 0x00  # noqa
    XML1        = 0x10  # noqa
    XHTML       = 0x20  # noqa
    HTML5       = 0x30  # noqa

    DEFAULT = COMPAT | HTML401


class Dialect(IntEnum):
    HTML401 = 0x00
    XML1 = 0x10
    XHTML = 0x20
    HTML5 = 0x30


_DIALECT_MASK = 0x30


def flagcast(value: Optional[Any]) -> ENT:
    """
    Converts an integer, a flag name such as `QUOTES`, or a combination like `QUOTES|XML1`
    into an `ENT` value. `None` yields the default.
    """
    if value is None:
        return ENT.DEFAULT
    if isinstance(value, ENT):
        return value
    if isinstance(value, str):
        result = ENT(0)
        for name in value.split('|'):
            name = name.strip().upper()
            if name.startswith('ENT_'):
                name = name[4:]
            if not name:
                continue
            try:
                result |= ENT[name]
            except KeyError as KE:
                raise ValueError(F'No flag named {name} in {ENT.__name__}.') from KE
        return result
    return ENT(int(value))


def dialect(flags: int) -> Dialect:
    return Dialect(flags & _DIALECT_MASK)


def escapes_double_quotes(flags: int) -> bool:
    return bool(flags & ENT.COMPAT)


def escapes_single_quotes(flags: int) -> bool:
    return bool(flags & ENT.SINGLE)
