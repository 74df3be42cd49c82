R"""
The xmlencoder package escapes and unescapes the XML/HTML special characters in text and
wraps text in CDATA sections. Everything is done by one class, `TextEscaper`, which is also
available as `XmlEncoder`:

    >>> from xmlencoder import XmlEncoder
    >>> XmlEncoder().encode('Rick & Morty')
    'Rick &amp; Morty'
    >>> XmlEncoder().cdata('a]]>b')
    '<![CDATA[a]]&gt;b]]>'

The behavior of an escaper is controlled by the `ENT` flags, the character encoding, and the
double encoding toggle; see `xmlencoder.escaper` and `xmlencoder.lib.flags`.
"""
from __future__ import annotations

__version__ = '1.0.0'
__distribution__ = 'xml-encoder'

from xmlencoder.escaper import EscapingConfiguration, InvalidConfiguration, TextEscaper, XmlEncoder
from xmlencoder.lib.flags import ENT

ENT_NOQUOTES   = ENT.NOQUOTES    # noqa
ENT_COMPAT     = ENT.COMPAT      # noqa
ENT_QUOTES     = ENT.QUOTES      # noqa
ENT_IGNORE     = ENT.IGNORE      # noqa
ENT_SUBSTITUTE = ENT.SUBSTITUTE  # noqa
ENT_HTML401    = ENT.HTML401     # noqa
ENT_XML1       = ENT.XML1        # noqa
ENT_XHTML      = ENT.XHTML       # noqa
ENT_HTML5      = ENT.HTML5       # noqa

__all__ = [
    'ENT',
    'ENT_COMPAT',
    'ENT_HTML401',
    'ENT_HTML5',
    'ENT_IGNORE',
    'ENT_NOQUOTES',
    'ENT_QUOTES',
    'ENT_SUBSTITUTE',
    'ENT_XHTML',
    'ENT_XML1',
    'EscapingConfiguration',
    'InvalidConfiguration',
    'TextEscaper',
    'XmlEncoder',
]
