"""
pgshell - Interactive PostgreSQL Console

Starts or verifies a local PostgreSQL server, lists its databases and runs
free-form multi-line statements typed at the console.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"
