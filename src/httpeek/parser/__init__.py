"""Command-line argument parsing for httpeek.

Turns raw argument strings into validated values before any network
activity takes place:

* :func:`parse_kv_pair` / :func:`parse_kv_pairs` -- ``key=value`` body fields.
* :func:`validate_url` -- absolute URLs.
"""

from httpeek.parser.pairs import parse_kv_pair, parse_kv_pairs
from httpeek.parser.url import validate_url

__all__ = ["parse_kv_pair", "parse_kv_pairs", "validate_url"]
