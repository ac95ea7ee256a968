'''
Compute user and session statistics from a session log and write them as JSON.

The input has one record per line:

  user,<id>,<first_name>,<last_name>,<age>
  session,<user_id>,<session_id>,<browser>,<time>,<date>

Sessions belong to the most recent user line above them.

Example, read data.txt and write result.json:

  sessionstats

Example, show the report for another file without writing anything:

  sessionstats -l -Y sessions.txt
'''
import os
import sys
import logging
import argparse
from sessionstats import common
from sessionstats import recordreader
from sessionstats import userregistry
from sessionstats import reportbuilder
from sessionstats import reportwriter


def readInput(input_file):
  '''
  Read the whole input as lines.

  Args:
    input_file: path of the session log

  Returns:
    list of lines
  '''
  with open(input_file, "r", encoding="utf-8") as source:
    text = source.read()
  lines = recordreader.splitLines(text)
  logging.debug("%d lines read from %s", len(lines), input_file)
  return lines


def buildReport(lines):
  '''
  Parse, register and aggregate lines into a report, entirely in memory.

  Args:
    lines: sequence of raw input lines

  Returns:
    report mapping

  Raises:
    ReportError subclasses for unrecognized records, orphan sessions or bad dates
  '''
  reader = recordreader.RecordReader()
  registry = userregistry.UserRegistry().loadRecords(reader.readRecords(lines))
  return reportbuilder.ReportBuilder().build(registry)


def computeReport(input_file=common.DEFAULT_INPUT_FILE,
                  output_file=common.DEFAULT_OUTPUT_FILE,
                  dry_run=False):
  '''
  Read input_file, build the report and write it to output_file.

  The output is only touched after the report has been built successfully.

  Args:
    input_file: path of the session log
    output_file: path of the JSON report
    dry_run: print the report to stdout instead of writing output_file

  Returns:
    the report
  '''
  report = buildReport(readInput(input_file))
  writer = reportwriter.ReportWriter(output_file)
  if dry_run:
    sys.stdout.write(writer.serialize(report))
    return report
  writer.write(report)
  return report


def resolveConfig(args):
  '''
  Combine command line, configuration file and defaults, in that order.

  Returns:
    dictionary with input and output
  '''
  config = dict(common.DEFAULT_REPORT_CONFIG)
  if args.config is not None:
    config = common.loadConfig(args.config, config)
  elif os.path.exists(common.DEFAULT_CONFIG_FILE):
    config = common.loadConfig(common.DEFAULT_CONFIG_FILE, config)
  if args.input is not None:
    config["input"] = args.input
  if args.output is not None:
    config["output"] = args.output
  return config


def main(argv=None):
  parser = argparse.ArgumentParser(description=__doc__,
    formatter_class=argparse.RawDescriptionHelpFormatter)
  parser.add_argument('-l', '--log_level',
                      action='count',
                      default=0,
                      help='Set logging level, multiples for more detailed.')
  parser.add_argument("-c", "--config",
                      default=None,
                      help="Configuration file ({})".format(common.DEFAULT_CONFIG_FILE))
  parser.add_argument("-Y", "--dryrun",
                      action="store_true",
                      help="Dry run - print the report instead of writing it.")
  parser.add_argument("input",
                      nargs="?",
                      default=None,
                      help="Session log to read ({})".format(common.DEFAULT_INPUT_FILE))
  parser.add_argument("output",
                      nargs="?",
                      default=None,
                      help="Report file to write ({})".format(common.DEFAULT_OUTPUT_FILE))
  args = parser.parse_args(argv)
  # Setup logging verbosity
  levels = [logging.WARNING, logging.INFO, logging.DEBUG]
  level = levels[min(len(levels) - 1, args.log_level)]
  logging.basicConfig(level=level,
                      format="%(asctime)s %(name)s %(levelname)s: %(message)s")

  if args.config is not None and not os.path.exists(args.config):
    logging.error("Configuration file not found: %s", args.config)
    return 1
  config = resolveConfig(args)
  try:
    computeReport(config["input"], config["output"], dry_run=args.dryrun)
  except common.ReportError as e:
    logging.error("Report not written: %s", e)
    return 1
  except (OSError, UnicodeDecodeError) as e:
    logging.error("Report not written: %s", e)
    return 1
  return 0


if __name__ == "__main__":
  sys.exit(main())
