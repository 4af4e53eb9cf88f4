# This file is meant to be used for creating pytest fixtures.
# It's a bit of a hack, but we can put global initialization here.

# The configuration is read when oj is first imported, so before that
# we point OJ_CONFIG to a throwaway configuration using a SQLite
# database and the problems defined in ojtestsuite.unit_tests.testconfig.
import os

from ojtestsuite.unit_tests.testconfig import write_test_config

os.environ["OJ_CONFIG"] = write_test_config()
