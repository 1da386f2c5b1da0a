def _to_bold_red(s):
  red = '\x1b[31m'
  bold = '\x1b[1m'
  reset = '\x1b[0m'
  return red + bold + s + reset

class SeqAlgoUsageError(Exception):
  def __init__(self, msg):
    Exception.__init__(self, _to_bold_red('You are calling seqalgo incorrectly')+'\n' + msg)

class SeqAlgoPreconditionError(Exception):
  def __init__(self, msg):
    Exception.__init__(self, _to_bold_red('seqalgo precondition violated:')+'\n' + msg)
