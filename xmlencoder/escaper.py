#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Escaping and unescaping of the XML/HTML special characters, and wrapping of text in CDATA
sections. A `xmlencoder.escaper.TextEscaper` is configured once and then used for any
number of strings:

    >>> from xmlencoder import TextEscaper, ENT
    >>> TextEscaper().encode('Rick & Morty')
    'Rick &amp; Morty'
    >>> TextEscaper(flags=ENT.QUOTES | ENT.XML1, double_encode=False).encode('&amp; \\'')
    '&amp; &apos;'

Note that `xmlencoder.escaper.TextEscaper.encode` respects all three configuration values
while `xmlencoder.escaper.TextEscaper.decode` only looks at the flags; the encoding and the
double encoding toggle have no influence on decoding.
"""
from __future__ import annotations

import codecs
import dataclasses
import functools
import re

from typing import Any, Mapping, Optional, TypeVar, Union

from xmlencoder.lib.entities import REFERENCE, codepoint, escape_table, is_valid_reference, unescape_table
from xmlencoder.lib.environment import default_charset, is_unicode_charset, logger
from xmlencoder.lib.flags import ENT, dialect, flagcast

__all__ = [
    'EscapingConfiguration',
    'InvalidConfiguration',
    'TextEscaper',
]

_T = TypeVar('_T', str, bytes)

_REPLACEMENT_CHARACTER = '\uFFFD'
_REPLACEMENT_REFERENCE = '&#xFFFD;'

_CDATA_OPEN = '<!['
_CDATA_SHUT = ']>'


class InvalidConfiguration(ValueError):
    """
    Raised on first use of an escaper whose configuration can not be applied, i.e. when the
    configured encoding does not name a known text codec.
    """
    def __init__(self, config: EscapingConfiguration, message: str):
        self.config = config
        super().__init__(message)


@dataclasses.dataclass(frozen=True)
class EscapingConfiguration:
    """
    The three values that configure a `xmlencoder.escaper.TextEscaper`:

    - `flags`: an `xmlencoder.lib.flags.ENT` bit-set, `ENT.COMPAT | ENT.HTML401` by default.
    - `encoding`: name of the character encoding used to interpret input text; defaults to
      the process-wide default charset, see `xmlencoder.lib.environment`.
    - `double_encode`: when disabled, existing character references are not escaped again.
    """
    flags: ENT = ENT.DEFAULT
    encoding: str = dataclasses.field(default_factory=default_charset)
    double_encode: bool = True

    _ALIASES = {
        'doubleEncode': 'double_encode',
        'doubleencode': 'double_encode',
    }

    @classmethod
    def FromOptions(cls, options: Optional[Mapping[str, Any]] = None, **kwargs) -> EscapingConfiguration:
        """
        Builds a configuration from a mapping of options and keyword arguments; keyword
        arguments take precedence. Missing values and values that are `None` receive their
        default, and so does an empty encoding name. Flags can be given as a string of names
        like `QUOTES|XML1`; an unknown name in such a string raises a `ValueError` here.
        """
        merged: dict[str, Any] = {}
        for source in (options or {}, kwargs):
            for key, value in source.items():
                key = cls._ALIASES.get(key, key)
                if key not in ('flags', 'encoding', 'double_encode'):
                    raise TypeError(F'Unknown escaping option: {key}')
                if value is None or (key == 'encoding' and not value):
                    continue
                merged[key] = value
        if 'flags' in merged:
            merged['flags'] = flagcast(merged['flags'])
        if 'double_encode' in merged:
            merged['double_encode'] = bool(merged['double_encode'])
        return cls(**merged)


class TextEscaper:
    """
    Converts between raw text and XML/HTML escaped text, and produces CDATA sections. The
    constructor accepts an `xmlencoder.escaper.EscapingConfiguration`, a mapping with the
    keys `flags`, `encoding`, and `double_encode`, or these values as keyword arguments.
    The configuration is not validated here: an unknown encoding only raises an
    `xmlencoder.escaper.InvalidConfiguration` when `encode` is first called.
    """

    __slots__ = '_config', '_log'

    def __init__(
        self,
        options: Union[EscapingConfiguration, Mapping[str, Any], None] = None,
        *,
        flags: Union[ENT, int, str, None] = None,
        encoding: Optional[str] = None,
        double_encode: Optional[bool] = None,
    ):
        if isinstance(options, EscapingConfiguration):
            config = options
            if flags is not None or encoding is not None or double_encode is not None:
                config = EscapingConfiguration.FromOptions(
                    dataclasses.asdict(config), flags=flags, encoding=encoding, double_encode=double_encode)
        else:
            config = EscapingConfiguration.FromOptions(
                options, flags=flags, encoding=encoding, double_encode=double_encode)
        self._config = config
        self._log = logger(__name__)
        self._log.debug(
            F'configured with flags={config.flags!r}, encoding={config.encoding}, double_encode={config.double_encode}')

    @property
    def config(self) -> EscapingConfiguration:
        return self._config

    @property
    def flags(self) -> ENT:
        return self._config.flags

    @property
    def encoding(self) -> str:
        return self._config.encoding

    @property
    def double_encode(self) -> bool:
        return self._config.double_encode

    def __repr__(self):
        c = self._config
        return F'{self.__class__.__name__}(flags={c.flags!r}, encoding={c.encoding!r}, double_encode={c.double_encode!r})'

    def _codec(self) -> str:
        encoding = self.encoding or default_charset()
        try:
            info = codecs.lookup(encoding)
        except LookupError as LE:
            raise InvalidConfiguration(self._config, F'Unknown encoding: {encoding}') from LE
        if not getattr(info, '_is_text_encoding', True):
            raise InvalidConfiguration(self._config, F'Not a text encoding: {encoding}')
        return info.name

    def _substitute(self, escaped: str, codec: str) -> str:
        if _REPLACEMENT_CHARACTER not in escaped or is_unicode_charset(codec):
            return escaped
        return escaped.replace(_REPLACEMENT_CHARACTER, _REPLACEMENT_REFERENCE)

    def _validate(self, text: str, codec: str) -> Optional[str]:
        """
        Returns the text with every character that can not be represented in the configured
        encoding either removed or substituted, depending on the flags. Returns `None` if
        such characters occur and neither `ENT.IGNORE` nor `ENT.SUBSTITUTE` is set.
        """
        try:
            text.encode(codec)
        except UnicodeEncodeError:
            pass
        else:
            return text
        flags = self.flags
        if not flags & (ENT.IGNORE | ENT.SUBSTITUTE):
            return None
        ignore = bool(flags & ENT.IGNORE)
        chars = []
        for char in text:
            try:
                char.encode(codec)
            except UnicodeEncodeError:
                if not ignore:
                    chars.append(_REPLACEMENT_CHARACTER)
            else:
                chars.append(char)
        return ''.join(chars)

    def _escape(self, text: str) -> str:
        flags = self.flags
        table = escape_table(flags)
        pattern = _special_characters(flags)
        if self.double_encode:
            return pattern.sub(lambda m: table[m[0]], text)
        d = dialect(flags)

        def escape(match: re.Match[str]) -> str:
            char = match[0]
            if char == '&':
                reference = REFERENCE.match(text, match.start())
                if reference is not None and is_valid_reference(reference, d):
                    return char
            return table[char]

        return pattern.sub(escape, text)

    def encode(self, text: _T) -> _T:
        """
        Replaces `&`, `<`, `>`, and quote characters as selected by the flags with character
        references. The input may be a string or a binary buffer; binary input is decoded
        using the configured encoding and the result is encoded again in the same way. When
        the input contains sequences that are invalid in this encoding, the result is empty
        unless the flags contain `ENT.IGNORE` or `ENT.SUBSTITUTE`.
        """
        codec = self._codec()
        if isinstance(text, str):
            valid = self._validate(text, codec)
            if valid is None:
                self._log.warning(F'input contains characters that can not be encoded as {codec}')
                return ''
            return self._substitute(self._escape(valid), codec)
        if not isinstance(text, (bytes, bytearray, memoryview)):
            raise TypeError(F'Expected a string or a binary buffer, got {type(text).__name__}.')
        flags = self.flags
        if flags & ENT.IGNORE:
            errors = 'ignore'
        elif flags & ENT.SUBSTITUTE:
            errors = 'replace'
        else:
            errors = 'strict'
        try:
            decoded = codecs.decode(bytes(text), codec, errors=errors)
        except UnicodeDecodeError as UE:
            self._log.warning(F'input is not a valid {codec} byte sequence: {UE!s}')
            return B''
        escaped = self._substitute(self._escape(decoded), codec)
        return codecs.encode(escaped, codec)

    def decode(self, text: str) -> str:
        """
        Converts the references for `&`, `<`, `>`, and the quote characters selected by the
        flags back to these characters. Named, decimal, and hexadecimal references are all
        decoded; every other reference, like `&copy;`, is left as it is. This operation does
        not depend on the encoding or the double encoding toggle.
        """
        if not isinstance(text, str):
            raise TypeError(F'Expected a string, got {type(text).__name__}.')
        names, chars = unescape_table(self.flags)

        def unescape(match: re.Match[str]) -> str:
            if name := match['name']:
                return names.get(name, match[0])
            if (code := codepoint(match)) is None:
                return match[0]
            char = chr(code)
            return char if char in chars else match[0]

        return REFERENCE.sub(unescape, text)

    def cdata(self, text: str) -> str:
        """
        Wraps the text in a CDATA section. Occurrences of `<![` and `]>` are replaced by
        `&lt;![` and `]&gt;` first, in this order, so that the input can neither open a
        nested section nor close the surrounding one. No other character is escaped.
        """
        if not isinstance(text, str):
            raise TypeError(F'Expected a string, got {type(text).__name__}.')
        text = text.replace(_CDATA_OPEN, '&lt;![')
        text = text.replace(_CDATA_SHUT, ']&gt;')
        return F'<![CDATA[{text}]]>'


@functools.lru_cache(maxsize=None)
def _special_characters(flags: int) -> re.Pattern[str]:
    return re.compile('[{}]'.format(re.escape(''.join(escape_table(flags)))))


XmlEncoder = TextEscaper
