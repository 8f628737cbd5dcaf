# Path: data_exporter/__main__.py
"""Allow running as: python -m data_exporter"""

import sys

from .main import main

sys.exit(main())
