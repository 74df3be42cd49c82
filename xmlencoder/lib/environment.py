#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A common interface to all xmlencoder configuration settings available via environment
variables. This module is also host to the logging configuration.
"""
from __future__ import annotations

import codecs
import os
import logging

from enum import IntEnum
from typing import Optional, TypeVar, Generic

_T = TypeVar('_T')


class LogLevel(IntEnum):
    """
    An enumeration representing the current log level:
    """
    DETACHED = logging.CRITICAL + 100
    """
    The escaper is used as a library and nothing should be written to the
    terminal. This is the level used by the test suite.
    """

    @classmethod
    def FromVerbosity(cls, verbosity: int):
        if verbosity < 0:
            return cls.DETACHED
        return {
            0: cls.WARNING,
            1: cls.INFO,
            2: cls.DEBUG
        }.get(verbosity, cls.DEBUG)

    NOTSET   = logging.NOTSET    # noqa
    CRITICAL = logging.CRITICAL  # noqa
    FATAL    = logging.FATAL     # noqa
    ERROR    = logging.ERROR     # noqa
    WARNING  = logging.WARNING   # noqa
    WARN     = logging.WARN      # noqa
    INFO     = logging.INFO      # noqa
    DEBUG    = logging.DEBUG     # noqa


class XmlEncoderFormatter(logging.Formatter):

    NAMES = {
        logging.CRITICAL : 'failure',
        logging.ERROR    : 'failure',
        logging.WARNING  : 'warning',
        logging.INFO     : 'comment',
        logging.DEBUG    : 'verbose',
    }

    def __init__(self, format, **kwargs):
        super().__init__(format, **kwargs)

    def formatMessage(self, record: logging.LogRecord) -> str:
        record.custom_level_name = self.NAMES.get(record.levelno, 'message')
        return super().formatMessage(record)


def logger(name: str) -> logging.Logger:
    """
    Obtain a logger which is configured with the default xmlencoder format. The log level
    is taken from `XMLENCODER_VERBOSITY` if it is set.
    """
    logger = logging.getLogger(name)
    if not logger.hasHandlers():
        stream = logging.StreamHandler()
        stream.setFormatter(XmlEncoderFormatter(
            '({asctime}) {custom_level_name} in {name}: {message}',
            style='{',
            datefmt='%H:%M:%S',
        ))
        logger.addHandler(stream)
        level = environment.verbosity.value
        logger.setLevel(LogLevel.WARNING if level is None else level)
    logger.propagate = False
    return logger


class EnvironmentVariableSetting(Generic[_T]):
    key: str
    value: Optional[_T]

    def __init__(self, name: str):
        self.key = F'XMLENCODER_{name}'
        self.value = self.read()

    def read(self) -> _T:
        return None


class EVLog(EnvironmentVariableSetting[Optional[LogLevel]]):
    def read(self):
        try:
            loglevel = os.environ[self.key]
        except KeyError:
            return None
        if loglevel.isdigit():
            return LogLevel.FromVerbosity(int(loglevel))
        try:
            loglevel = LogLevel[loglevel.upper()]
        except KeyError:
            levels = ', '.join(ll.name for ll in LogLevel)
            logging.getLogger(__name__).warning(
                F'ignoring unknown verbosity "{loglevel!r}"; pick from: {levels}')
            return None
        else:
            return loglevel


class EVCharset(EnvironmentVariableSetting[str]):
    """
    The process-wide default character encoding. Unknown codec names are kept as they are;
    they only cause an error once an escaper actually has to use them.
    """
    DEFAULT = 'UTF-8'

    def read(self):
        value = os.environ.get(self.key, '').strip()
        return value or self.DEFAULT


class environment:
    verbosity = EVLog('VERBOSITY')
    charset = EVCharset('CHARSET')


def default_charset() -> str:
    """
    Returns the value of `XMLENCODER_CHARSET`, or `UTF-8` when it is not set.
    """
    return environment.charset.value or EVCharset.DEFAULT


def is_unicode_charset(name: str) -> bool:
    """
    Returns whether the codec with the given name can represent every code point.
    """
    try:
        return codecs.lookup(name).name in {
            'utf-8', 'utf-16', 'utf-16-le', 'utf-16-be', 'utf-32', 'utf-32-le', 'utf-32-be',
            'utf-7', 'utf-8-sig'}
    except LookupError:
        return False
