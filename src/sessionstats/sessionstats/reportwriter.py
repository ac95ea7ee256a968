'''
Persists a report as a single line of JSON.
'''
import os
import json
import stat
import logging
import tempfile


class ReportWriter(object):

  ENCODING = "utf-8"

  def __init__(self, output_file):
    self._L = logging.getLogger(self.__class__.__name__)
    self._output_file = output_file

  @property
  def output_file(self):
    return self._output_file

  def serialize(self, report):
    '''
    Compact JSON followed by one newline.
    '''
    return json.dumps(report, separators=(",", ":"), ensure_ascii=False) + "\n"

  def _targetMode(self, target):
    '''
    Permission bits for the report: those of an existing output, otherwise
    what a newly created file gets under the current umask.
    '''
    if os.path.exists(target):
      return stat.S_IMODE(os.stat(target).st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask

  def write(self, report):
    '''
    Replace the output file with the serialized report.

    The text is written to a temporary file next to the output which is then
    moved over it, so the output is either the old or the complete new report.

    Args:
      report: mapping to write

    Returns:
      number of characters written
    '''
    msg = self.serialize(report)
    # Write through a symlinked output to the file it points at
    target = os.path.realpath(self._output_file)
    mode = self._targetMode(target)
    fd, tmp_path = tempfile.mkstemp(dir=os.path.dirname(target), prefix=".sessionstats-", suffix=".tmp")
    try:
      with os.fdopen(fd, "w", encoding=ReportWriter.ENCODING, newline="") as dest:
        dest.write(msg)
      os.chmod(tmp_path, mode)
      os.replace(tmp_path, target)
    except BaseException:
      try:
        os.unlink(tmp_path)
      except OSError as e:
        self._L.warning("Temporary file %s not removed: %s", tmp_path, e)
      raise
    self._L.info("Report written to %s", self._output_file)
    return len(msg)
