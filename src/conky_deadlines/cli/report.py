"""Report CLI command."""

import argparse
from datetime import date


def cmd_report(args: argparse.Namespace) -> int:
    from conky_deadlines.course_config import course_table
    from conky_deadlines.deadlines.aggregate import collect_deadlines
    from conky_deadlines.deadlines.errors import DeadlineFileError
    from conky_deadlines.deadlines.render import render_report
    from conky_deadlines.deadlines.window import upcoming

    courses = course_table()

    try:
        deadlines = collect_deadlines(courses, include_done=False)
    except DeadlineFileError as e:
        print(e)
        return e.exit_code

    # One reference day for both the window and the past-due colouring
    today = date.today()
    for line in render_report(upcoming(deadlines, today=today), courses, today=today, max_len=args.max_len):
        print(line)
    return 0
