# -*- coding: utf-8 -*-

"""
Main entry point for running CKEditor Toolkit from a source checkout.
"""

import sys

from ckeditor_toolkit.cli import main

if __name__ == '__main__':
    sys.exit(main())
