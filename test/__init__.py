import logging
import random
import string
import unittest

import xmlencoder


__all__ = ['xmlencoder', 'TestBase']


class TestBase(unittest.TestCase):

    def generate_random_text(self, size, alphabet=string.printable):
        return ''.join(alphabet[random.randrange(0, len(alphabet))] for _ in range(size))

    def setUp(self):
        random.seed(0xBAADF00D)  # guarantee deterministic 'random' strings
        logging.disable(logging.CRITICAL)

    def tearDown(self):
        logging.disable(logging.NOTSET)

    def assertContains(self, container, member, msg=None):
        self.assertIn(member, container, msg)
