'''
Metrics computed over sequences of sessions.

Every metric is a pure function. USER_METRICS are applied to the sessions of
one user, GLOBAL_METRICS to the full user and session lists. Both lists are
ordered, that order is the key order of the report.

Browser names are compared in their original case for de-duplication, then
upper cased for display. "Chrome" and "chrome" therefore count as two
browsers in uniqueBrowsersCount and both appear in allBrowsers.
'''
import collections

IE_MARKER = "INTERNET EXPLORER"
CHROME_MARKER = "CHROME"
MINUTES_FORMAT = "{} min."


def _browsers(sessions):
  return [session.browser for session in sessions]


def _distinctBrowsers(sessions):
  return sorted(set(_browsers(sessions)))


# Per user metrics

def sessionsCount(sessions):
  return len(sessions)


def totalTime(sessions):
  return MINUTES_FORMAT.format(sum(session.minutes for session in sessions))


def longestSession(sessions):
  '''
  Longest session in minutes. An empty list has no maximum and renders as
  " min.".
  '''
  if len(sessions) == 0:
    return MINUTES_FORMAT.format("")
  return MINUTES_FORMAT.format(max(session.minutes for session in sessions))


def browsers(sessions):
  '''
  All browsers of the sessions upper cased and sorted, duplicates kept.
  '''
  return ", ".join(sorted(browser.upper() for browser in _browsers(sessions)))


def usedIE(sessions):
  return any(IE_MARKER in browser.upper() for browser in _distinctBrowsers(sessions))


def alwaysUsedChrome(sessions):
  '''
  True if every browser is a Chrome, also True when there are no sessions.
  '''
  return all(CHROME_MARKER in browser.upper() for browser in _distinctBrowsers(sessions))


def dates(sessions):
  '''
  Session dates as YYYY-MM-DD, newest first, duplicates kept.

  Raises:
    DateParseFailure for a date that can not be parsed
  '''
  return sorted((session.isoDate() for session in sessions), reverse=True)


USER_METRICS = (
  ("sessionsCount", sessionsCount),
  ("totalTime", totalTime),
  ("longestSession", longestSession),
  ("browsers", browsers),
  ("usedIE", usedIE),
  ("alwaysUsedChrome", alwaysUsedChrome),
  ("dates", dates),
)


# Global metrics

def totalUsers(users, sessions):
  return len(users)


def uniqueBrowsersCount(users, sessions):
  return len(_distinctBrowsers(sessions))


def totalSessions(users, sessions):
  return len(sessions)


def allBrowsers(users, sessions):
  '''
  Distinct browsers sorted in original case, then upper cased and joined.
  '''
  return ",".join(browser.upper() for browser in _distinctBrowsers(sessions))


GLOBAL_METRICS = (
  ("totalUsers", totalUsers),
  ("uniqueBrowsersCount", uniqueBrowsersCount),
  ("totalSessions", totalSessions),
  ("allBrowsers", allBrowsers),
)


def computeUserStats(sessions):
  '''
  Apply every per user metric to the sessions of one user.

  Args:
    sessions: sequence of entities.Session

  Returns:
    OrderedDict of metric name to value
  '''
  return collections.OrderedDict(
    (name, metric(sessions)) for name, metric in USER_METRICS)


def computeGlobalStats(users, sessions):
  '''
  Apply every global metric.

  Args:
    users: sequence of entities.User
    sessions: sequence of all entities.Session

  Returns:
    OrderedDict of metric name to value
  '''
  return collections.OrderedDict(
    (name, metric(users, sessions)) for name, metric in GLOBAL_METRICS)
