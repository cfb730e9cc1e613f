"""Classify a feature file line by line and report the first syntax error."""

import sys

from pepino import UnparsableLineError, tokenize

source = """Scenario: Login succeeds
  Given a user exists
  When they log in
  Then they see the dashboard
  Given something else
"""

try:
    for token in tokenize(source, source_file="login.feature"):
        print(token)
except UnparsableLineError as err:
    print(err, file=sys.stderr)
