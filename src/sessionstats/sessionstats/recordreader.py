'''
Classifies the lines of a session log into typed records.

Each line is comma delimited, the first token names the record type:

  user,<id>,<first_name>,<last_name>,<age>
  session,<user_id>,<session_id>,<browser>,<time>,<date>

Remaining tokens map by position onto the field names of the type. Extra
tokens are ignored, missing trailing tokens become empty strings.
'''
import logging
import collections
from sessionstats import common
from sessionstats.entities import User, Session

DELIMITER = ","
USER_RECORD = "user"
SESSION_RECORD = "session"

Record = collections.namedtuple("Record", ["record_type", "fields", "line_number"])


def splitLines(text):
  '''
  Split file content into record lines.

  Trailing blank lines are dropped and a CR left over from CRLF line endings
  is removed. Blank lines inside the file are kept and fail as records.

  Args:
    text: Full text of the input

  Returns:
    list of lines
  '''
  lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
  while len(lines) > 0 and lines[-1] == "":
    lines.pop()
  return lines


class RecordReader(object):

  RECORD_FIELDS = {
    USER_RECORD: User.FIELDS,
    SESSION_RECORD: Session.FIELDS,
  }

  def __init__(self):
    self._L = logging.getLogger(self.__class__.__name__)
    # Token position of each field, computed once per record type
    self._positions = {}
    for record_type, fields in RecordReader.RECORD_FIELDS.items():
      self._positions[record_type] = tuple(
        (field, position + 1) for position, field in enumerate(fields))

  def readRecord(self, line, line_number=None):
    '''
    Convert one line to a Record.

    Args:
      line: raw text of the line
      line_number: 1-based position of the line, used in error messages

    Returns:
      Record

    Raises:
      UnrecognizedRecordType if the first token is not a known record type
    '''
    tokens = line.split(DELIMITER)
    record_type = tokens[0]
    positions = self._positions.get(record_type)
    if positions is None:
      raise common.UnrecognizedRecordType(
        "Unexpected record type '{}'".format(record_type),
        value=record_type,
        line_number=line_number)
    fields = {}
    for field, position in positions:
      fields[field] = tokens[position] if position < len(tokens) else ""
    return Record(record_type, fields, line_number)

  def readRecords(self, lines):
    '''
    Generate records for lines, in order.

    Args:
      lines: iterable of raw lines

    Returns:
      generator of Record
    '''
    for line_number, line in enumerate(lines, start=1):
      yield self.readRecord(line, line_number=line_number)
