"""Office Presence package.

Shows who plans to be in the office on the upcoming weekdays, based on the
meal orders people placed with Forkable. Organized by feature modules
(forkable, roster, users) with a thin Flask controller layer over service
classes.
"""
