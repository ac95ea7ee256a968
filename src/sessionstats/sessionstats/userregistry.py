'''
Builds users from a record stream and attaches sessions to them.
'''
import logging
from sessionstats import common
from sessionstats import recordreader
from sessionstats.entities import User, Session


class UserRegistry(object):
  '''
  Consumes records in input order.

  A user record creates a new User which becomes the active user. A session
  record is attached to the active user and to the global session list. This
  is the only place Users and Sessions are created or changed.
  '''

  def __init__(self):
    self._L = logging.getLogger(self.__class__.__name__)
    self._users = []
    self._sessions = []
    self._current = None
    self._closed = False

  @property
  def users(self):
    return tuple(self._users)

  @property
  def sessions(self):
    return tuple(self._sessions)

  @property
  def closed(self):
    return self._closed

  def addRecord(self, record):
    '''
    Add a single record.

    Args:
      record: a recordreader.Record

    Returns:
      The User or Session created

    Raises:
      OrphanSessionRecord if a session arrives before any user
    '''
    if self._closed:
      raise ValueError("Registry is closed, no more records can be added")
    if record.record_type == recordreader.USER_RECORD:
      self._current = User.fromRecord(record)
      self._users.append(self._current)
      return self._current
    if record.record_type == recordreader.SESSION_RECORD:
      if self._current is None:
        raise common.OrphanSessionRecord(
          "Session record before any user record",
          value=record.fields.get("session_id"),
          line_number=record.line_number)
      session = Session.fromRecord(record)
      self._current.addSession(session)
      self._sessions.append(session)
      return session
    raise common.UnrecognizedRecordType(
      "Unexpected record type '{}'".format(record.record_type),
      value=record.record_type,
      line_number=record.line_number)

  def loadRecords(self, records):
    '''
    Add all records then close the registry.

    Args:
      records: iterable of recordreader.Record

    Returns:
      self
    '''
    for record in records:
      self.addRecord(record)
    self.close()
    self._L.debug("%d users with %d sessions", len(self._users), len(self._sessions))
    return self

  def close(self):
    '''
    Freeze users and sessions, nothing changes after this.
    '''
    for user in self._users:
      user.close()
    self._current = None
    self._closed = True
