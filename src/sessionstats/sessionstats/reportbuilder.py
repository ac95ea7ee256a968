'''
Assembles the session report from a closed UserRegistry.
'''
import logging
import collections
from sessionstats import sessionmetrics

USERS_STATS = "usersStats"


def mergeUserStats(users_stats, full_name, stats):
  '''
  Insert the stats of one user into the usersStats mapping.

  Users are keyed by full name. When two users share a full name their stats
  are merged metric by metric and the later user wins.

  Args:
    users_stats: OrderedDict of full name to stats, updated in place
    full_name: key for the user
    stats: complete stats of the user

  Returns:
    True if an earlier user with the same full name was merged
  '''
  existing = users_stats.get(full_name)
  if existing is None:
    users_stats[full_name] = stats
    return False
  merged = collections.OrderedDict(existing)
  merged.update(stats)
  users_stats[full_name] = merged
  return True


class ReportBuilder(object):

  def __init__(self):
    self._L = logging.getLogger(self.__class__.__name__)

  def buildUsersStats(self, users):
    users_stats = collections.OrderedDict()
    for user in users:
      stats = sessionmetrics.computeUserStats(user.sessions)
      if mergeUserStats(users_stats, user.full_name, stats):
        self._L.warning("Users share the name '%s', stats of user %s replace earlier ones",
                        user.full_name, user.id)
    return users_stats

  def build(self, registry):
    '''
    Build the report.

    Args:
      registry: a closed userregistry.UserRegistry

    Returns:
      OrderedDict with totalUsers, uniqueBrowsersCount, totalSessions,
      allBrowsers and usersStats, in that order
    '''
    if not registry.closed:
      raise ValueError("Registry must be closed before building a report")
    users = registry.users
    report = sessionmetrics.computeGlobalStats(users, registry.sessions)
    report[USERS_STATS] = self.buildUsersStats(users)
    self._L.debug("Report built for %d users", len(report[USERS_STATS]))
    return report
