'''
User and Session entities built from the records of a session log.

A Session belongs to exactly one User. The registry also keeps every Session
in a global list for the report totals, so both views share the same objects.
'''
from sessionstats import common


class Session(object):

  FIELDS = ("user_id", "session_id", "browser", "time", "date", )

  def __init__(self, user_id, session_id, browser, time, date):
    self.user_id = user_id
    self.session_id = session_id
    self.browser = browser
    self.time = time
    self.date = date

  @classmethod
  def fromRecord(cls, record):
    return cls(**record.fields)

  @property
  def minutes(self):
    return common.textToMinutes(self.time)

  def isoDate(self):
    '''
    Returns:
      The session date as YYYY-MM-DD, raises DateParseFailure if not a date
    '''
    return common.textToIsoDate(self.date)

  def __repr__(self):
    return "Session(user_id={!r}, session_id={!r}, browser={!r})".format(
      self.user_id, self.session_id, self.browser)


class User(object):

  FIELDS = ("id", "first_name", "last_name", "age", )

  def __init__(self, id, first_name, last_name, age):
    self.id = id
    self.first_name = first_name
    self.last_name = last_name
    self.age = age
    self._sessions = []

  @classmethod
  def fromRecord(cls, record):
    return cls(**record.fields)

  @property
  def full_name(self):
    return "{} {}".format(self.first_name, self.last_name)

  @property
  def sessions(self):
    return self._sessions

  def addSession(self, session):
    if isinstance(self._sessions, tuple):
      raise ValueError("Sessions of user {} are closed".format(self.id))
    self._sessions.append(session)

  def close(self):
    '''
    Freeze the session list once parsing is done.
    '''
    self._sessions = tuple(self._sessions)

  def __repr__(self):
    return "User(id={!r}, full_name={!r}, sessions={})".format(
      self.id, self.full_name, len(self._sessions))
