'''
Constants, exceptions and field coercion common across the report tools.
'''
import os
import re
import logging
import datetime
import configparser
from dateutil import parser as dateparser

#Default locations of input, output and configuration files
DEFAULT_INPUT_FILE = "data.txt"
DEFAULT_OUTPUT_FILE = "result.json"
DEFAULT_CONFIG_FILE = os.path.expanduser("~/.config/sessionstats/report.ini")

CONFIG_REPORT_SECTION = "report"
DEFAULT_REPORT_CONFIG = {
  "input": DEFAULT_INPUT_FILE,
  "output": DEFAULT_OUTPUT_FILE,
}

# Leading integer prefix, e.g. "12 minutes" -> 12, "1_000" -> 1000
MINUTES_PATTERN = re.compile(r"^\s*([+-]?\d+(?:_\d+)*)")


class ReportError(ValueError):
  '''
  Base for all errors that abort building a report.
  '''

  def __init__(self, message, value=None, line_number=None):
    self.value = value
    self.line_number = line_number
    if line_number is not None:
      message = "line {}: {}".format(line_number, message)
    super(ReportError, self).__init__(message)


class UnrecognizedRecordType(ReportError):
  pass


class OrphanSessionRecord(ReportError):
  pass


class DateParseFailure(ReportError):
  pass


def loadConfig(config_file, config=None):
  '''
  Load report settings from an INI file.

  Args:
    config_file: Path to an INI format configuration file, section [report].
    config: Values to start from, defaults to DEFAULT_REPORT_CONFIG

  Returns:
    dictionary of configuration values
  '''
  _L = logging.getLogger('common')
  if config is None:
    config = dict(DEFAULT_REPORT_CONFIG)
  parser = configparser.ConfigParser()
  _L.debug("Loading configuration from %s", config_file)
  parser.read(config_file)
  for key, value in iter(config.items()):
    config[key] = parser.get(CONFIG_REPORT_SECTION, key, fallback=value)
  return config


def textToMinutes(txt):
  '''
  Convert the text of a session time to whole minutes.

  Only the leading integer is used, so "25", "25min" and " 25" are all 25.
  Text without a leading integer, including an empty or missing value, is 0.

  Args:
    txt: Textual representation of minutes

  Returns:
    Integer minutes
  '''
  if txt is None:
    return 0
  match = MINUTES_PATTERN.match(txt)
  if match is None:
    return 0
  return int(match.group(1).replace("_", ""))


def textToIsoDate(txt):
  '''
  Convert plain text to a YYYY-MM-DD calendar date string.

  Unlike minutes, dates are strict: anything dateutil can not parse fails,
  including trailing words after the date. A missing day is the 1st and a
  missing month is January, a missing year is the current year. Numeric dates
  with slashes are read month first, "01/02/2016" is 2016-01-02.

  Args:
    txt: Textual representation of a date, e.g. "2016-10-01"

  Returns:
    ISO-8601 date string

  Raises:
    DateParseFailure
  '''
  try:
    d = dateparser.parse(txt, default=datetime.datetime(datetime.date.today().year, 1, 1))
  except (ValueError, OverflowError, TypeError) as e:
    raise DateParseFailure("Unable to convert '{}' to a date: {}".format(txt, e), value=txt)
  return d.date().isoformat()
