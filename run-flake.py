#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import os.path
import sys

from inspect import stack
from glob import glob
from flake8.api import legacy as flake8

if __name__ != '__main__':
    raise ImportError('This script should not be imported.')

here = os.path.dirname(os.path.abspath(stack()[0][1]))

rules = flake8.get_style_guide(ignore=[
    'E203',  # Colons should not have any space before them.
    'E221',  # Multiple spaces before operator, used to align flag tables.
    'W503',  # Line break occurred before a binary operator
], max_line_length=140)

files = []
for folder in ('xmlencoder', 'test'):
    files.extend(glob(os.path.join(here, folder, '**', '*.py'), recursive=True))

report = rules.check_files(files)
errors = len(report.get_statistics('E'))

if not errors:
    print('Success! No FLAKE8 violations were found.')

sys.exit(errors)
