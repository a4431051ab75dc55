"""Pattern for Dropbox Paper document URLs.

Paper URLs end in ``/doc/<title>--<26-char token>-<21-char id>``.
"""

import re

PAPER_URL_PATTERN = re.compile(r"paper\.dropbox\.com/doc/.+--\S{26}-(\w{21})", re.ASCII)
