'''
This package builds a statistics report from a log of users and their sessions.

The basic workflow is:

lines = readInput( input_file )
records = RecordReader().readRecords( lines )
registry = UserRegistry().loadRecords( records )
report = ReportBuilder().build( registry )
ReportWriter( output_file ).write( report )

Per user the report holds the session count, total and longest time, the
browsers used and the session dates. Over all users it holds the user and
session totals and the distinct browsers.
'''
