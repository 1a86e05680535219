#!/usr/bin/env python
import os
import sys
from optparse import OptionParser
import logging

import django
from django.conf import settings
from django.test.utils import get_runner

logging.disable(logging.CRITICAL)

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'tests.settings')


def run_tests(*test_args):
    django.setup()
    if not test_args:
        test_args = ['tests']

    # Test modules are named *_tests.py
    TestRunner = get_runner(settings)
    test_runner = TestRunner(verbosity=1, pattern='*_tests.py')

    num_failures = test_runner.run_tests(test_args)

    if num_failures > 0:
        sys.exit(num_failures)


if __name__ == '__main__':
    parser = OptionParser()
    (options, args) = parser.parse_args()
    run_tests(*args)
