"""
  Process-wide settings of seqalgo

  `check_preconditions`
      When on, the search functions first verify (in O(n)) that the searched
      range is partitioned by their predicate and raise
      `SeqAlgoPreconditionError` otherwise.
      Initialized from the environment variable SEQALGO_CHECK_PRECONDITIONS.
"""
import os


def _env_flag(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Options:
    def __init__(self):
        self.check_preconditions = _env_flag('SEQALGO_CHECK_PRECONDITIONS')


options = Options()
