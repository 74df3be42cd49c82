#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Character reference tables for the supported markup dialects.
"""
from __future__ import annotations

import functools
import re

from typing import Optional
from html.entities import html5, name2codepoint

from xmlencoder.lib.flags import Dialect, escapes_double_quotes, escapes_single_quotes, dialect

__all__ = [
    'MAX_CODEPOINT',
    'REFERENCE',
    'codepoint',
    'known_names',
    'is_valid_reference',
    'escape_table',
    'unescape_table',
]

MAX_CODEPOINT = 0x10FFFF

REFERENCE = re.compile(
    R'&(?:#(?P<dec>[0-9]+)|#[xX](?P<hex>[0-9a-fA-F]+)|(?P<name>[A-Za-z][A-Za-z0-9]*));')
"""
Matches a single decimal, hexadecimal, or named character reference including the
terminating semicolon.
"""

_MAX_DIGITS = {10: len(str(MAX_CODEPOINT)), 16: len(F'{MAX_CODEPOINT:x}')}

_XML_NAMES = frozenset(('amp', 'lt', 'gt', 'quot', 'apos'))


@functools.lru_cache(maxsize=None)
def known_names(d: Dialect) -> frozenset[str]:
    """
    The set of named references that the given dialect defines.
    """
    if d is Dialect.XML1:
        return _XML_NAMES
    if d is Dialect.HTML5:
        return frozenset(name[:-1] for name in html5 if name.endswith(';'))
    names = set(name2codepoint)
    if d is Dialect.XHTML:
        names.add('apos')
    return frozenset(names)


def codepoint(match: re.Match[str]) -> Optional[int]:
    """
    Returns the code point of a numeric reference matched by `xmlencoder.lib.entities.REFERENCE`,
    or `None` if the reference is named or lies beyond U+10FFFF.
    """
    if dec := match['dec']:
        digits, base = dec.lstrip('0'), 10
    elif hx := match['hex']:
        digits, base = hx.lstrip('0'), 16
    else:
        return None
    if len(digits) > _MAX_DIGITS[base]:
        return None
    code = int(digits or '0', base)
    return code if code <= MAX_CODEPOINT else None


def is_valid_reference(match: re.Match[str], d: Dialect) -> bool:
    """
    Decides whether a match of `xmlencoder.lib.entities.REFERENCE` is a reference that
    should be preserved when double encoding is disabled.
    """
    if name := match['name']:
        return name in known_names(d)
    return codepoint(match) is not None


@functools.lru_cache(maxsize=None)
def escape_table(flags: int) -> dict[str, str]:
    """
    Maps every character that is escaped under the given flags to its reference.
    """
    table = {
        '&': '&amp;',
        '<': '&lt;',
        '>': '&gt;',
    }
    if escapes_double_quotes(flags):
        table['"'] = '&quot;'
    if escapes_single_quotes(flags):
        table['\''] = '&#039;' if dialect(flags) is Dialect.HTML401 else '&apos;'
    return table


@functools.lru_cache(maxsize=None)
def unescape_table(flags: int) -> tuple[dict[str, str], frozenset[str]]:
    """
    Returns a pair: the named references that are decoded under the given flags, mapped to
    their characters, and the set of characters for which numeric references are decoded.
    """
    names = {
        'amp': '&',
        'lt': '<',
        'gt': '>',
    }
    if escapes_double_quotes(flags):
        names['quot'] = '"'
    if escapes_single_quotes(flags) and dialect(flags) is not Dialect.HTML401:
        names['apos'] = '\''
    chars = set(names.values())
    if escapes_single_quotes(flags):
        chars.add('\'')
    return names, frozenset(chars)
